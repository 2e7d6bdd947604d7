"""Copy fields between objects that share field names and types."""

from __future__ import annotations

import dataclasses
from typing import Any

_BUILTIN_TYPES = {
    t.__name__: t
    for t in (int, float, complex, str, bool, bytes, bytearray, list, dict, tuple, set, frozenset)
}


def _resolve(annotation: Any) -> Any:
    if isinstance(annotation, str):
        name = annotation.strip()
        if name in ("Any", "typing.Any"):
            return Any
        return _BUILTIN_TYPES.get(name, name)
    return annotation


def _field_types(obj: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _resolve(f.type) for f in dataclasses.fields(obj)}
    return {
        name: Any if value is None else type(value)
        for name, value in vars(obj).items()
    }


def _compatible(value: Any, source_type: Any, target_type: Any) -> bool:
    if target_type is Any or source_type == target_type:
        return True
    if isinstance(value, bool) and target_type is not bool:
        return False
    return isinstance(target_type, type) and isinstance(value, target_type)


def translate(source: Any, target: Any) -> None:
    """Set every field of target whose name and type match a field of source."""
    source_types = _field_types(source)
    target_types = _field_types(target)
    for name, source_type in source_types.items():
        if name not in target_types:
            continue
        value = getattr(source, name)
        if _compatible(value, source_type, target_types[name]):
            setattr(target, name, value)