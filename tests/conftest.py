"""
Shared pytest fixtures for smb_mkdirp test suite.

Provides fixtures for:
- A scripted in-memory dispatcher
- A sleep replacement that records backoff delays
- Isolated config storage
"""

import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from smb_mkdirp.errors import STATUS_OBJECT_NAME_NOT_FOUND
from smb_mkdirp.errors import StatusError


class FakeDispatcher:
    """In-memory dispatcher with scripted failures.

    ``existing`` holds directories that open successfully. Any other path
    answers STATUS_OBJECT_NAME_NOT_FOUND on open. ``scripts`` maps
    ``(operation, path)`` to a list of errors raised by successive calls
    before the default behaviour resumes.
    """

    def __init__(self, existing: set[str] | None = None) -> None:
        self.existing: set[str] = set(existing or ())
        self.scripts: dict[tuple[str, str], list[BaseException]] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.open_handles: set[str] = set()
        self.in_flight = 0
        self.max_in_flight = 0

    def script(self, operation: str, path: str, *errors: BaseException) -> None:
        self.scripts.setdefault((operation, path), []).extend(errors)

    def _next_error(self, operation: str, path: str) -> BaseException | None:
        queued = self.scripts.get((operation, path))
        if queued:
            return queued.pop(0)
        return None

    async def open_folder(self, path: str) -> str:
        self.calls.append(("open_folder", path))
        self._enter()
        try:
            error = self._next_error("open_folder", path)
            if error is not None:
                raise error
            if path not in self.existing:
                raise StatusError(STATUS_OBJECT_NAME_NOT_FOUND)
            self.open_handles.add(path)
            return path
        finally:
            self.in_flight -= 1

    async def create_folder(self, path: str, mode: int) -> str:
        self.calls.append(("create_folder", path, mode))
        self._enter()
        try:
            error = self._next_error("create_folder", path)
            if error is not None:
                raise error
            self.existing.add(path)
            self.open_handles.add(path)
            return path
        finally:
            self.in_flight -= 1

    async def close(self, handle: str) -> None:
        self.calls.append(("close", handle))
        self.open_handles.discard(handle)

    def _enter(self) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)

    def operations(self, name: str) -> list[str]:
        """Paths passed to one operation, in call order."""
        return [call[1] for call in self.calls if call[0] == name]


class RecordingSleep:
    """Stand-in for asyncio.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)

    @property
    def delays_ms(self) -> list[int]:
        return [round(seconds * 1000) for seconds in self.delays]


@pytest.fixture
def dispatcher() -> FakeDispatcher:
    """Dispatcher with an empty share."""
    return FakeDispatcher()


@pytest.fixture
def sleep() -> RecordingSleep:
    """Sleep replacement recording backoff delays."""
    return RecordingSleep()


@pytest.fixture
def temp_storage_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test storage."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_storage_env(temp_storage_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point SMB_MKDIRP_HOME at a temp directory and clear overrides.

    Returns:
        Path to temporary storage directory
    """
    monkeypatch.setenv("SMB_MKDIRP_HOME", str(temp_storage_dir))
    monkeypatch.delenv("SMB_MKDIRP_CONFIG_DIR", raising=False)
    for name in ("MAX_RETRIES", "BASE_DELAY_MS", "MULTIPLIER", "MAX_DELAY_MS", "DEFAULT_MODE", "LOG_LEVEL"):
        monkeypatch.delenv(f"SMB_MKDIRP_{name}", raising=False)
    monkeypatch.chdir(temp_storage_dir)
    return temp_storage_dir
