"""Request errors and the result types of the request boundary.

Error codes:
- R001: request bytes are not valid UTF-8
- R002: wrong number of comma-separated fields
- R003..R005: a field does not parse as its numeric type
- R006: surface order n is zero
- R007: the request produced no points
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

__all__ = [
    'RequestErrorKind',
    'RequestError',
    'ConfigError',
    'Success',
    'Failure',
    'Result',
    'error_invalid_encoding',
    'error_field_count',
    'error_invalid_field',
    'error_nonpositive_n',
    'error_empty_surface',
]


class RequestErrorKind(Enum):
    """Reasons a surface request is rejected."""
    INVALID_ENCODING = "R001"
    FIELD_COUNT = "R002"
    INVALID_N = "R003"
    INVALID_ALPHA = "R004"
    INVALID_SUBDIVISIONS = "R005"
    NONPOSITIVE_N = "R006"
    EMPTY_SURFACE = "R007"

    @property
    def code(self) -> str:
        return self.value


class RequestError(Exception):
    """A surface request that cannot be served."""

    def __init__(self, kind: RequestErrorKind, message: str, field: Optional[str] = None):
        self.kind = kind
        self.message = message
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def to_json(self) -> dict:
        """Convert to a JSON-serializable dict for the HTTP service."""
        return {
            "code": self.kind.code,
            "kind": self.kind.name.lower(),
            "message": self.message,
            "field": self.field,
        }


class ConfigError(Exception):
    """Configuration file could not be read or has the wrong shape."""
    pass


@dataclass(frozen=True)
class Success:
    """A served request; ``value`` is the ``SurfaceResult``."""
    value: object

    ok = True


@dataclass(frozen=True)
class Failure:
    """A rejected request."""
    error: RequestError

    ok = False

    @property
    def kind(self) -> RequestErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message


Result = Union[Success, Failure]


# --- Factories ---

_FIELD_KINDS = {
    "n": RequestErrorKind.INVALID_N,
    "alpha": RequestErrorKind.INVALID_ALPHA,
    "subdivisions": RequestErrorKind.INVALID_SUBDIVISIONS,
}


def error_invalid_encoding() -> RequestError:
    """R001: request is not UTF-8."""
    return RequestError(RequestErrorKind.INVALID_ENCODING, "invalid UTF-8")


def error_field_count() -> RequestError:
    """R002: request does not have exactly three fields."""
    return RequestError(RequestErrorKind.FIELD_COUNT,
                        "expected 3 parameters (n,alpha,subdivisions)")


def error_invalid_field(name: str) -> RequestError:
    """R003-R005: field ``name`` failed to parse."""
    return RequestError(_FIELD_KINDS[name], f"invalid {name}", field=name)


def error_nonpositive_n() -> RequestError:
    """R006: n = 0 has no branches and an undefined exponent."""
    return RequestError(RequestErrorKind.NONPOSITIVE_N, "n must be positive", field="n")


def error_empty_surface() -> RequestError:
    """R007: nothing was generated, so there is no z range."""
    return RequestError(RequestErrorKind.EMPTY_SURFACE, "empty surface")
