# -*- test-case-name: actorwire.test.test_state -*-
"""
L{ActorStateSerializer} is the serializer the actor runtime transport talks
to.  It writes L{TimerDescriptor} and L{ReminderDescriptor} in the runtime's
own compact JSON shapes, hands every other value to an L{ObjectSerializer},
and wraps and unwraps the runtime's C{{"data": <base64>}} envelope.

Special handling is chosen by exact type: a subclass of either descriptor is
treated like any other application value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Type, cast

from twisted.logger import Logger

from .boundaries import DeserializationError, ObjectSerializer, T
from .descriptors import ReminderDescriptor, TimerDescriptor, reminderFromText
from .durations import MalformedDurationError
from .envelope import unwrapBytes, wrapBytes
from .serializers.json import JSONObjectSerializer, compactJSON

log = Logger()


@dataclass(frozen=True)
class ActorStateSerializer:
    """
    Serialize and deserialize actor state, timers, and reminders.

    @ivar serializer: the generic serializer used for everything that is not
        one of the runtime's descriptor types.
    """

    serializer: ObjectSerializer = field(default_factory=JSONObjectSerializer)

    def serializeToString(self, value: object) -> str | None:
        """
        Convert C{value} to text.
        """
        if value is None:
            return None
        if type(value) is TimerDescriptor or type(value) is ReminderDescriptor:
            return compactJSON(value.toJSON(self))
        return self.serializer.toString(value)

    def serialize(self, value: object) -> bytes | None:
        """
        Convert C{value} to bytes; the UTF-8 form of L{serializeToString} for
        descriptors, and the generic serializer's bytes for anything else.
        """
        if type(value) is TimerDescriptor or type(value) is ReminderDescriptor:
            text = self.serializeToString(value)
            assert text is not None
            return text.encode("utf-8")
        return self.serializer.toBytes(value)

    def deserialize(
        self, value: bytes | str | None, targetType: Type[T]
    ) -> T | None:
        """
        Convert C{value} into an instance of C{targetType}.

        Only L{ReminderDescriptor} has a dedicated decoder; there is none for
        L{TimerDescriptor}, which the runtime never sends back.

        @raise DeserializationError: if C{value} cannot be converted.
        @raise MalformedDurationError: if a duration field of C{value} is not
            valid duration text; it is not wrapped.
        """
        try:
            if targetType is ReminderDescriptor:
                if value is None:
                    return None
                raw = value if isinstance(value, bytes) else str(value)
                return cast(T, reminderFromText(raw))
            if value is None:
                return None
            data = value if isinstance(value, bytes) else value.encode("utf-8")
            return self.serializer.fromBytes(data, targetType)
        except (DeserializationError, MalformedDurationError):
            raise
        except Exception as e:
            log.debug(
                "cannot deserialize {typeName}: {error}",
                typeName=targetType.__name__,
                error=e,
            )
            raise DeserializationError(
                f"cannot deserialize {targetType.__name__}: {e}"
            ) from e

    def wrapData(self, value: object) -> str | None:
        """
        Serialize C{value} with the generic serializer and wrap the result in
        an envelope, for sending to the runtime.
        """
        if value is None:
            return None
        return wrapBytes(self.serializer.toBytes(value))

    def unwrapData(self, payload: str | None, targetType: Type[T]) -> T | None:
        """
        Extract an instance of C{targetType} from an envelope received from
        the runtime.

        @return: the deserialized value, or C{None} if C{payload} is C{None}
            or carries no data.

        @raise MalformedEnvelopeError: if C{payload} is not JSON.
        @raise DeserializationError: if the carried data cannot be converted
            to C{targetType}.
        @raise MalformedDurationError: if the carried data has an invalid
            duration field.
        """
        if payload is None:
            return None
        data = unwrapBytes(payload)
        if data is None:
            return None
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as ude:
            raise DeserializationError(
                f"envelope data is not UTF-8: {ude}"
            ) from ude
        return self.deserialize(text, targetType)


__all__ = [
    "ActorStateSerializer",
]
