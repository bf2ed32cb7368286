"""Error taxonomy for trainweek.

Every business-rule failure is raised at the point of detection and rendered
unchanged at the boundary (HTTP handler or CLI).
"""


class TrainweekError(Exception):
    """Base class for errors surfaced to the caller."""

    status_code = 500
    reason = "Internal Server Error"

    def __init__(self, message: str | list[str]):
        super().__init__(message if isinstance(message, str) else "; ".join(message))
        self.message = message

    def to_dict(self) -> dict:
        return {
            "statusCode": self.status_code,
            "error": self.reason,
            "message": self.message,
        }


class BadRequestError(TrainweekError):
    """Malformed identifier or failed field validation."""

    status_code = 400
    reason = "Bad Request"


class NotFoundError(TrainweekError):
    """Referenced record is missing (or its owner is not active)."""

    status_code = 404
    reason = "Not Found"


class ConflictError(TrainweekError):
    """Duplicate email, occupied weekday, or repeated soft delete."""

    status_code = 409
    reason = "Conflict"


# Largest value an SQLite INTEGER column can hold
MAX_ID = 2**63 - 1


def parse_id(value: int | str, label: str = "ID") -> int:
    """Coerce an identifier to int, raising BadRequestError otherwise.

    Only plain decimal digits in the range 1..MAX_ID are accepted.
    """
    if isinstance(value, bool):
        raise BadRequestError(f"{label} must be a valid integer")
    if isinstance(value, int):
        parsed = value
    else:
        text = str(value).strip()
        if not (text.isascii() and text.isdigit()):
            raise BadRequestError(f"{label} must be a valid integer")
        parsed = int(text)
    if not 1 <= parsed <= MAX_ID:
        raise BadRequestError(f"{label} must be between 1 and {MAX_ID}")
    return parsed
