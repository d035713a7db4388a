# -*- test-case-name: actorwire.test.test_descriptors -*-
"""
The runtime's own descriptor types, and their JSON shapes.

A L{TimerDescriptor} is sent to the runtime when a timer is registered::

    {"dueTime": "0h0m5s0ms", "period": "0h0m0s0ms", "callback": "tick",
     "data": "<serialized state>"}

A L{ReminderDescriptor} is both sent when a reminder is registered and
received back when the runtime reports one::

    {"dueTime": "0h0m5s0ms", "period": "0h1m0s0ms", "data": "<text>"}

In both shapes, C{data} is left out entirely when there is nothing to carry.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from json import JSONDecodeError, loads
from typing import TYPE_CHECKING

from typing_extensions import Self

from .boundaries import (
    CALLBACK_FIELD,
    DATA_FIELD,
    DUE_TIME_FIELD,
    PERIOD_FIELD,
    DeserializationError,
    JSONObject,
    StateSerializer,
)
from .durations import durationFromDaprFormat, durationToDaprFormat
from .serializers.json import compactJSON


class MissingFieldError(DeserializationError):
    """
    A required field was absent from a runtime payload.

    @ivar field: the name of the missing field.
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"required field {field!r} is missing")
        self.field = field


@dataclass(frozen=True)
class TimerDescriptor:
    """
    A possibly-repeating invocation of C{callback} on an actor.

    @ivar dueTime: how long after registration the first invocation happens.
    @ivar period: the interval between subsequent invocations.
    @ivar callback: the name of the actor method to invoke.
    @ivar state: application state passed to C{callback}, or C{None}.
    """

    dueTime: timedelta
    period: timedelta
    callback: str
    state: object | None = None

    def toJSON(self, serializer: StateSerializer) -> JSONObject:
        """
        Convert this timer to its JSON shape, serializing C{state} to text
        with C{serializer}.
        """
        json: JSONObject = {
            DUE_TIME_FIELD: durationToDaprFormat(self.dueTime),
            PERIOD_FIELD: durationToDaprFormat(self.period),
            CALLBACK_FIELD: self.callback,
        }
        if self.state is not None:
            data = serializer.serializeToString(self.state)
            if data is not None:
                json[DATA_FIELD] = data
        return json


@dataclass(frozen=True)
class ReminderDescriptor:
    """
    A reminder persisted by the runtime.

    @ivar dueTime: how long after registration the reminder first fires.
    @ivar period: the interval between subsequent firings.
    @ivar data: already-serialized text delivered with the reminder, or
        C{None}.  It is carried verbatim in both directions.
    """

    dueTime: timedelta
    period: timedelta
    data: str | None = None

    def toJSON(self, serializer: StateSerializer) -> JSONObject:
        """
        Convert this reminder to its JSON shape.  C{serializer} is unused,
        since C{data} is already text.
        """
        json: JSONObject = {
            DUE_TIME_FIELD: durationToDaprFormat(self.dueTime),
            PERIOD_FIELD: durationToDaprFormat(self.period),
        }
        if self.data is not None:
            json[DATA_FIELD] = self.data
        return json

    @classmethod
    def fromJSON(cls, json: JSONObject) -> Self:
        """
        Load a reminder from its JSON shape.

        C{data} is C{None} when it is absent I{or} JSON C{null}; a C{null} is
        never turned into the text C{"null"}.  Any other non-text C{data} is
        kept as its compact JSON text.

        @raise MissingFieldError: if C{dueTime} or C{period} is absent.
        @raise DeserializationError: if a duration field is not text.
        @raise MalformedDurationError: if a duration field is not a valid
            duration.
        """
        dueTime = durationFromDaprFormat(_requiredText(json, DUE_TIME_FIELD))
        period = durationFromDaprFormat(_requiredText(json, PERIOD_FIELD))
        data = json.get(DATA_FIELD)
        if data is not None and not isinstance(data, str):
            data = compactJSON(data)
        return cls(dueTime, period, data)


def _requiredText(json: JSONObject, field: str) -> str:
    value = json.get(field)
    if value is None:
        raise MissingFieldError(field)
    if not isinstance(value, str):
        raise DeserializationError(
            f"field {field!r} must be text, not {type(value).__name__}"
        )
    return value


def reminderFromText(raw: bytes | str) -> ReminderDescriptor:
    """
    Parse a reminder from the JSON text (or UTF-8 bytes) the runtime sends.
    """
    text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    try:
        json = loads(text)
    except JSONDecodeError as jde:
        raise DeserializationError(f"reminder is not JSON: {jde}") from jde
    if not isinstance(json, dict):
        raise DeserializationError(
            f"reminder must be a JSON object, not {type(json).__name__}"
        )
    return ReminderDescriptor.fromJSON(json)


if TYPE_CHECKING:
    from .boundaries import JSONable

    _isJSONable: JSONable = TimerDescriptor(timedelta(), timedelta(), "")
    _alsoJSONable: JSONable = ReminderDescriptor(timedelta(), timedelta())


__all__ = [
    "MissingFieldError",
    "ReminderDescriptor",
    "TimerDescriptor",
    "reminderFromText",
]
