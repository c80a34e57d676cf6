"""Parsing of the ``n,alpha,subdivisions`` request text."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Union

from cypoints.errors import (
    error_field_count,
    error_invalid_encoding,
    error_invalid_field,
    error_nonpositive_n,
)

__all__ = ['SurfaceRequest', 'parse_request', 'decode_request']

_UNSIGNED_RE = re.compile(r'\+?[0-9]+\Z')

# Integer fields are 32-bit unsigned on the wire
UNSIGNED_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class SurfaceRequest:
    """Validated arguments of one generation request."""

    n: int
    alpha: float
    subdivisions: int

    def to_text(self) -> str:
        """Return the request in its wire form."""
        return f"{self.n},{self.alpha!r},{self.subdivisions}"


def decode_request(data: Union[bytes, bytearray, str]) -> str:
    """Return the request text, raising R001 for bytes that are not UTF-8."""
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode('utf-8')
    except UnicodeDecodeError as exc:
        raise error_invalid_encoding() from exc


def _parse_unsigned(text: str, name: str) -> int:
    if not _UNSIGNED_RE.match(text):
        raise error_invalid_field(name)
    digits = text.lstrip('+').lstrip('0') or '0'
    try:
        value = int(digits)
    except ValueError as exc:
        raise error_invalid_field(name) from exc
    if value > UNSIGNED_MAX:
        raise error_invalid_field(name)
    return value


def _parse_float(text: str, name: str) -> float:
    # float() also takes digit separators and non-ASCII digits, the wire format does not
    if '_' in text or not text.isascii():
        raise error_invalid_field(name)
    try:
        value = float(text)
    except ValueError as exc:
        raise error_invalid_field(name) from exc
    # the trigonometry downstream is undefined for inf and nan
    if not math.isfinite(value):
        raise error_invalid_field(name)
    return value


def parse_request(data: Union[bytes, bytearray, str]) -> SurfaceRequest:
    """Parse a request of the form ``n,alpha,subdivisions``.

    Parameters
    ----------
    data : bytes or str
        Request payload. Surrounding whitespace is ignored, as is whitespace
        around each field.

    Returns
    -------
    SurfaceRequest

    Raises
    ------
    RequestError
        If the payload is not UTF-8, does not have exactly three fields, a
        field does not parse, or ``n`` is zero. Fields are checked in order
        and the first failure is reported.
    """
    text = decode_request(data)
    parts = text.strip().split(',')
    if len(parts) != 3:
        raise error_field_count()

    n_text, alpha_text, subdivisions_text = (p.strip() for p in parts)
    n = _parse_unsigned(n_text, 'n')
    alpha = _parse_float(alpha_text, 'alpha')
    subdivisions = _parse_unsigned(subdivisions_text, 'subdivisions')

    if n == 0:
        raise error_nonpositive_n()

    return SurfaceRequest(n=n, alpha=alpha, subdivisions=subdivisions)
