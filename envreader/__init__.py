from __future__ import annotations
from .reader import EnvReader, get_bool, get_int, get_integer, get_string
from .record import load_record

__version__ = "0.1.0"

__all__ = [
    "EnvReader",
    "get_bool",
    "get_int",
    "get_integer",
    "get_string",
    "load_record",
]
