from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Type, TypeVar
from pydantic import BaseModel
from .reader import EnvReader

M = TypeVar("M", bound=BaseModel)

Getter = Callable[[EnvReader, str, Any], Any]

GETTERS: Dict[type, Getter] = {
    str: EnvReader.get_string,
    int: EnvReader.get_integer,
    bool: EnvReader.get_bool,
}


def env_name(field_name: str, alias: Optional[str], prefix: str = "") -> str:
    return prefix + (alias if alias else field_name.upper())


def load_record(model: Type[M], prefix: str = "", reader: Optional[EnvReader] = None) -> M:
    """Build ``model`` from the environment, one variable per field.

    ``port: int = 8000`` reads ``{prefix}PORT`` with 8000 as the fallback.
    Fields must be ``str``, ``int`` or ``bool`` and carry a default.
    """
    reader = reader or EnvReader()
    # keyed by field name, as default factories taking data expect
    data: Dict[str, Any] = {}
    values: Dict[str, Any] = {}
    for field_name, info in model.model_fields.items():
        getter = GETTERS.get(info.annotation)  # type: ignore[arg-type]
        if getter is None:
            raise TypeError(f"{model.__name__}.{field_name}: unsupported type {info.annotation!r}")
        if info.is_required():
            raise TypeError(f"{model.__name__}.{field_name}: a default is required")
        default = info.get_default(call_default_factory=True, validated_data=data)
        data[field_name] = getter(reader, env_name(field_name, info.alias, prefix), default)
        values[info.alias or field_name] = data[field_name]
    return model(**values)
