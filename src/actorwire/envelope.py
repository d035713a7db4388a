# -*- test-case-name: actorwire.test.test_envelope -*-
"""
The envelope the Dapr runtime uses to carry opaque payloads: a JSON object
whose single C{data} field holds the payload bytes, base64-encoded::

    {"data": "aGk="}

An envelope with no payload is the empty object, C{{}}.

Base64 is applied by L{encodeBinaryField} and L{decodeBinaryField}, separately
from the JSON writing in L{wrapBytes} and L{unwrapBytes}.
"""

from __future__ import annotations

from base64 import b64decode, b64encode
from binascii import Error as Base64Error
from json import JSONDecodeError, loads

from twisted.logger import Logger

from .boundaries import DATA_FIELD, ActorWireError, JSONObject
from .serializers.json import compactJSON

log = Logger()


class MalformedEnvelopeError(ActorWireError, ValueError):
    """
    An envelope payload was not parseable JSON.
    """


def encodeBinaryField(data: bytes) -> str:
    """
    Encode C{data} as standard base64 text, with padding.
    """
    return b64encode(data).decode("ascii")


def decodeBinaryField(value: object) -> bytes | None:
    """
    Decode the value of a JSON binary field, or return C{None} if C{value} is
    not base64 text.
    """
    if not isinstance(value, str):
        return None
    try:
        return b64decode(value, validate=True)
    except (Base64Error, ValueError):
        return None


def wrapBytes(data: bytes | None) -> str:
    """
    Build an envelope around C{data}, or an empty envelope if it is C{None}.
    """
    envelope: JSONObject = {}
    if data is not None:
        envelope[DATA_FIELD] = encodeBinaryField(data)
    return compactJSON(envelope)


def unwrapBytes(payload: str) -> bytes | None:
    """
    Extract the bytes from an envelope.

    @return: the decoded payload, or C{None} if the envelope is not an object,
        carries no C{data} field, or its C{data} is not base64.

    @raise MalformedEnvelopeError: if C{payload} is not JSON at all.
    """
    try:
        root = loads(payload)
    except JSONDecodeError as jde:
        raise MalformedEnvelopeError(str(jde)) from jde
    if not isinstance(root, dict):
        log.debug("envelope root is not an object: {root!r}", root=root)
        return None
    if DATA_FIELD not in root:
        log.debug("envelope has no {field} field", field=DATA_FIELD)
        return None
    data = decodeBinaryField(root[DATA_FIELD])
    if data is None:
        log.debug("envelope {field} field is not base64", field=DATA_FIELD)
    return data


__all__ = [
    "MalformedEnvelopeError",
    "decodeBinaryField",
    "encodeBinaryField",
    "unwrapBytes",
    "wrapBytes",
]
