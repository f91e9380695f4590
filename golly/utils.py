"""Plain-text display of record objects."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_struct(obj: Any) -> str:
    """Render a dataclass instance as a brace-delimited list of its fields."""
    if not is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")
    lines = ["{"]
    lines.extend(
        f"    {f.name}: {_format_value(getattr(obj, f.name))}" for f in fields(obj)
    )
    lines.append("}")
    return "\n".join(lines)


def print_struct(obj: Any) -> None:
    """Print a dataclass instance field by field."""
    print(format_struct(obj))