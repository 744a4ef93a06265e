"""Small record helpers: a rectangle value and JSON conversion for plain objects."""

from __future__ import annotations

import json
from typing import Any, TypeVar

T = TypeVar("T")


class Rectangle:
    __slots__ = ("width", "height")

    width: float
    height: float

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def get_area(self) -> float:
        return self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width!r}, height={self.height!r})"


def _fields(obj: Any) -> dict[str, Any]:
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    slots: list[str] = []
    for klass in reversed(type(obj).__mro__):
        names = getattr(klass, "__slots__", ())
        if isinstance(names, str):
            names = (names,)
        slots.extend(names)
    # Declared slot order is the field order
    return {name: getattr(obj, name) for name in slots if not name.startswith("_") and hasattr(obj, name)}


def _default(obj: Any) -> Any:
    fields = _fields(obj)
    if not fields:
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    return fields


def to_json(obj: Any) -> str:
    """Return the JSON text for ``obj``.

    Plain values go through ``json.dumps`` unchanged; other objects are
    written as a mapping of their public fields.
    """
    return json.dumps(obj, default=_default, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """Build a ``cls`` instance from JSON, passing the object's values positionally in order."""
    data = json.loads(text)
    if isinstance(data, dict):
        return cls(*data.values())
    if isinstance(data, list):
        return cls(*data)
    return cls(data)
