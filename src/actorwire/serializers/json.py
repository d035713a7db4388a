# -*- test-case-name: actorwire.test.test_serializers -*-
"""
A JSON-backed L{ObjectSerializer}, the default for
L{actorwire.state.ActorStateSerializer}.

Text and bytes pass through untouched, so a string sent as actor state arrives
at the runtime as its own UTF-8 bytes rather than as a quoted JSON string;
everything else is written as compact JSON.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, is_dataclass
from datetime import timedelta
from json import dumps, loads
from typing import Any, Type, cast, get_type_hints

from ..boundaries import JSONObject, ObjectSerializer, T
from ..durations import durationFromDaprFormat, durationToDaprFormat


def _jsonDefault(obj: object) -> object:
    if isinstance(obj, timedelta):
        return durationToDaprFormat(obj)
    raise TypeError(
        f"Object of type {type(obj).__name__} is not JSON serializable"
    )


def compactJSON(obj: object) -> str:
    """
    Dump C{obj} as JSON without insignificant whitespace, leaving non-ASCII
    text unescaped.  L{timedelta}s are written in the runtime's duration
    format.
    """
    return dumps(
        obj, ensure_ascii=False, separators=(",", ":"), default=_jsonDefault
    )


def _dataclassFromJSON(targetType: Type[T], parsed: object) -> T:
    """
    Build a dataclass from a parsed JSON object, reading L{timedelta} fields
    from duration text.

    @raise TypeError: if C{parsed} is not an object or a duration field is not
        text.
    """
    if not isinstance(parsed, dict):
        raise TypeError(
            f"{targetType.__name__} must be a JSON object, "
            f"not {type(parsed).__name__}"
        )
    hints = get_type_hints(targetType)
    kwargs: JSONObject = dict(parsed)
    for each in fields(targetType):  # type:ignore[arg-type]
        if each.name not in kwargs or hints.get(each.name) is not timedelta:
            continue
        value = kwargs[each.name]
        if not isinstance(value, str):
            raise TypeError(
                f"{targetType.__name__}.{each.name} must be duration text, "
                f"not {type(value).__name__}"
            )
        kwargs[each.name] = durationFromDaprFormat(value)
    return targetType(**kwargs)


@dataclass(frozen=True)
class JSONObjectSerializer:
    """
    Serialize application state with the standard library's L{json} module.
    Dataclass instances are written as objects and rebuilt from their fields.
    """

    def toBytes(self, value: object) -> bytes | None:
        if value is None:
            return None
        if isinstance(value, bytes):
            return value
        if isinstance(value, str):
            return value.encode("utf-8")
        if is_dataclass(value) and not isinstance(value, type):
            return compactJSON(asdict(value)).encode("utf-8")
        return compactJSON(value).encode("utf-8")

    def toString(self, value: object) -> str | None:
        """
        Text form of L{toBytes}.

        @raise ValueError: if C{value} is bytes that are not UTF-8 text.
        """
        if isinstance(value, str):
            return value
        data = self.toBytes(value)
        if data is None:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as ude:
            raise ValueError(
                f"cannot convert non-UTF-8 bytes to text: {ude}"
            ) from ude

    def fromBytes(self, data: bytes, targetType: Type[T]) -> T | None:
        if targetType is bytes:
            return cast(T, data)
        if targetType is str:
            return cast(T, data.decode("utf-8"))
        if not data:
            return None
        parsed: Any = loads(data.decode("utf-8"))
        if is_dataclass(targetType):
            return _dataclassFromJSON(targetType, parsed)
        if targetType in (int, float, bool):
            return cast(T, targetType(parsed))  # type:ignore[call-arg]
        return cast(T, parsed)


_SerializerCheck: type[ObjectSerializer] = JSONObjectSerializer

__all__ = [
    "JSONObjectSerializer",
    "compactJSON",
]
