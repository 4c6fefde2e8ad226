"""JSON helpers: compact serialization and typed deserialization."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    ``[1, 2, 3]`` becomes ``'[1,2,3]'``; dataclass instances are written as
    objects of their fields.
    """
    return json.dumps(obj, separators=(",", ":"), default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and return an instance of *cls* carrying its keys.

    ``cls.__init__`` is not called: the parsed keys become instance
    attributes as-is, so methods defined on *cls* operate on them.

    Raises:
        TypeError: The JSON document is not an object.
        json.JSONDecodeError: *text* is not valid JSON.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    instance = cls.__new__(cls)
    instance.__dict__.update(data)
    return instance
