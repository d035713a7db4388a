"""
L{actorwire.boundaries} describes the boundaries between the parts of the
codec and its interface with the code that sits around it: the generic object
serializer it delegates to, and the actor runtime transport that consumes its
output.  It contains L{Protocol}s, L{TypeVar}s, constant values, and the
shared exception types, but no logic of its own.
"""

from __future__ import annotations

from typing import Any, Protocol, Type, TypeVar

T = TypeVar("T")
"""
The type a caller asks a payload to be deserialized into.
"""

JSONObject = dict[str, Any]
"""
A loose description of a JSON-dumpable object.
"""

# Field names of the runtime's JSON shapes; case-sensitive.
DUE_TIME_FIELD = "dueTime"
PERIOD_FIELD = "period"
CALLBACK_FIELD = "callback"
DATA_FIELD = "data"


class ActorWireError(Exception):
    """
    Base class for every failure raised by C{actorwire}.
    """


class DeserializationError(ActorWireError):
    """
    A payload could not be converted into the requested type.
    """


class ObjectSerializer(Protocol):
    """
    Generic serializer for ordinary application state; everything that is not
    one of the runtime's own descriptor types is delegated to one of these.
    """

    def toBytes(self, value: object) -> bytes | None:
        """
        Convert C{value} to raw bytes, or C{None} if there is nothing to send.
        """

    def toString(self, value: object) -> str | None:
        """
        Convert C{value} to text, or C{None} if there is nothing to send.
        """

    def fromBytes(self, data: bytes, targetType: Type[T]) -> T | None:
        """
        Convert C{data}, previously produced by L{toBytes
        <ObjectSerializer.toBytes>}, back into an instance of C{targetType}.
        """


class StateSerializer(Protocol):
    """
    The text-producing half of L{actorwire.state.ActorStateSerializer}, passed
    to descriptors so that they can serialize nested state.
    """

    def serializeToString(self, value: object) -> str | None:
        """
        Convert C{value} to text, honoring the special cases.
        """


class JSONable(Protocol):
    """
    An object that can describe itself as a JSON-dumpable dict.
    """

    def toJSON(self, serializer: StateSerializer) -> JSONObject:
        """
        Convert this object to a JSON-serializable dictionary, using
        C{serializer} for any nested application state.
        """


__all__ = [
    "ActorWireError",
    "CALLBACK_FIELD",
    "DATA_FIELD",
    "DUE_TIME_FIELD",
    "DeserializationError",
    "JSONObject",
    "JSONable",
    "ObjectSerializer",
    "PERIOD_FIELD",
    "StateSerializer",
    "T",
]
