"""Shared schema building blocks."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# Loose address check; normalisation (trim + lowercase) happens in the service
EMAIL_PATTERN = r"^\s*[^@\s]+@[^@\s]+\.[^@\s]+\s*$"
URL_PATTERN = r"^https?://\S+$"

# Request locations that carry no meaning for the caller
_LOCATION_PREFIXES = {"body", "query", "path"}


def _parse_flag(value: Any) -> Any:
    """Accept native booleans or the literal strings ``true``/``false``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError("must be true or false")


Flag = Annotated[bool, BeforeValidator(_parse_flag)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    """Acknowledgement body returned by delete endpoints."""

    message: str


def validation_messages(errors: list[dict]) -> list[str]:
    """Render pydantic error dicts as ``field: message`` strings."""
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        field = ".".join(loc)
        msg = error.get("msg", "Invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return messages
