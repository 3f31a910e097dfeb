"""Typed environment variable getters with default fallbacks.

Every getter returns the caller's default when the variable is unset or
cannot be coerced; none of them raise.

Note: for the int and bool getters a variable set to the empty string is
treated exactly like an unset one, because they read through
``get_string(name, "")``. ``get_string`` itself still returns ``""``.
Also, ``get_int`` returns the default for a literal outside the signed
64-bit range rather than wrapping it around.
"""

from __future__ import annotations
import logging
import os
import re
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# Optional whitespace, optional minus, ASCII digits only.
_INT_LITERAL = re.compile(r"\s*-?[0-9]+\s*")

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

# Below the smallest value sys.set_int_max_str_digits() accepts (640).
_CHUNK_DIGITS = 600


def _parse_long_integer(literal: str) -> int:
    negative = literal.startswith("-")
    digits = literal.lstrip("-")
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk, 10)
    return -value if negative else value


def _parse_integer(raw: str) -> Optional[int]:
    if not _INT_LITERAL.fullmatch(raw):
        return None
    try:
        return int(raw, 10)
    except ValueError:
        # longer than sys.get_int_max_str_digits()
        return _parse_long_integer(raw.strip())


def _capitalize(raw: str) -> str:
    return raw[:1].upper() + raw[1:].lower()


class EnvReader:
    """Reads variables from ``environ`` (``os.environ`` when not given) on every call."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def get_string(self, name: str, default: str) -> str:
        value = self.environ.get(name)
        if value is None:
            return default
        return value

    def get_integer(self, name: str, default: int) -> int:
        """Arbitrary precision integer."""
        raw = self.get_string(name, "")
        if raw == "":
            return default
        value = _parse_integer(raw)
        if value is None:
            logger.debug("env %s=%r is not an integer; using default %r", name, raw, default)
            return default
        return value

    def get_int(self, name: str, default: int) -> int:
        """Integer bounded to a signed 64-bit word; out of range counts as unparsable."""
        raw = self.get_string(name, "")
        if raw == "":
            return default
        value = _parse_integer(raw)
        if value is None or not INT_MIN <= value <= INT_MAX:
            logger.debug("env %s=%r is not a 64-bit int; using default %r", name, raw, default)
            return default
        return value

    def get_bool(self, name: str, default: bool) -> bool:
        raw = self.get_string(name, "")
        if raw == "":
            return default
        # TRUE, true, tRuE all become "True"
        normalized = _capitalize(raw)
        if normalized == "True":
            return True
        if normalized == "False":
            return False
        logger.debug("env %s=%r is not a boolean; using default %r", name, raw, default)
        return default


_default_reader = EnvReader()


def get_string(name: str, default: str) -> str:
    return _default_reader.get_string(name, default)


def get_int(name: str, default: int) -> int:
    return _default_reader.get_int(name, default)


def get_integer(name: str, default: int) -> int:
    return _default_reader.get_integer(name, default)


def get_bool(name: str, default: bool) -> bool:
    return _default_reader.get_bool(name, default)
