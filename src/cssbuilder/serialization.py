"""JSON encode/decode helpers for plain values and dataclasses."""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any, TypeVar

__all__ = ["to_json", "from_json"]

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are encoded as their field mapping and enum members
    as their value::

        to_json([1, 2, 3])                 -> '[1,2,3]'
        to_json({"width": 10, "height": 20}) -> '{"width":10,"height":20}'
    """
    return json.dumps(obj, default=_default, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from a JSON object.

    The decoded keys are passed to *cls* as keyword arguments, so *cls* is
    typically a dataclass.  Raises ``ValueError`` when the text is not a
    JSON object and ``TypeError`` when the keys do not fit *cls*.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return cls(**data)
