"""Path request models."""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

DEFAULT_MODE = 0o777

CANONICAL_SEPARATOR = "\\"
ALTERNATE_SEPARATOR = "/"


def parse_mode(value: int | str) -> int:
    """Read a creation mode given as an int or an octal string.

    Strings are always octal: "0777", "0o755" and "755" are accepted.

    Example:
        >>> parse_mode("0777") == 0o777
        True
    """
    if isinstance(value, str):
        return int(value.strip().lower().removeprefix("0o"), 8)
    return value


class RequestedPath(BaseModel):
    """A directory creation request as received from the caller.

    Immutable once constructed. String modes are read as octal, the same
    way the config layer reads them; the resulting int is forwarded to the
    remote side as is.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Path as supplied by the caller (either separator style)")
    mode: int = Field(default=DEFAULT_MODE, strict=True, description="Creation mode forwarded to create_folder")

    @field_validator("mode", mode="before")
    @classmethod
    def parse_octal_mode(cls, v: int | str) -> int:
        return parse_mode(v)
