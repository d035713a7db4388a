# -*- test-case-name: actorwire.test.test_durations -*-
"""
Conversion between L{timedelta} and the textual duration format understood by
the Dapr runtime.

The runtime parses durations with Go's C{time.ParseDuration}, so that is the
grammar accepted by L{durationFromDaprFormat}.  L{durationToDaprFormat} always
emits the canonical C{<hours>h<minutes>m<seconds>s<millis>ms} shape, with
days folded into the hour count, and a trailing C{<micros>us} term only when
the value has sub-millisecond precision::

    >>> durationToDaprFormat(timedelta(days=1, minutes=15, milliseconds=60))
    '24h15m0s60ms'
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal, Inexact, localcontext

from .boundaries import ActorWireError

_MICROSECOND = timedelta(microseconds=1)

_NANOS_PER_UNIT = {
    "h": Decimal(3_600_000_000_000),
    "m": Decimal(60_000_000_000),
    "s": Decimal(1_000_000_000),
    "ms": Decimal(1_000_000),
    "us": Decimal(1_000),
    "µs": Decimal(1_000),  # micro sign
    "μs": Decimal(1_000),  # greek small letter mu
    "ns": Decimal(1),
}

# "ms" must be tried before "m".
_TERM = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(h|ms|m|s|us|µs|μs|ns)", re.ASCII)


class MalformedDurationError(ActorWireError, ValueError):
    """
    Text could not be interpreted as a runtime duration.
    """


def durationToDaprFormat(delta: timedelta) -> str:
    """
    Convert C{delta} to the runtime's duration text.

    Negative durations are written with a single leading C{-} applied to the
    whole magnitude, as Go does.
    """
    micros = delta // _MICROSECOND
    sign = "-" if micros < 0 else ""
    millis, micros = divmod(abs(micros), 1000)
    seconds, millis = divmod(millis, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    text = f"{sign}{hours}h{minutes}m{seconds}s{millis}ms"
    if micros:
        text += f"{micros}us"
    return text


def durationFromDaprFormat(text: str) -> timedelta:
    """
    Parse the runtime's duration text into a L{timedelta}.

    @raise MalformedDurationError: if C{text} is not a Go-style duration, or
        if it cannot be represented exactly as a L{timedelta}.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return timedelta(0)
    if not rest:
        raise MalformedDurationError(f"invalid duration {text!r}")

    nanos = Decimal(0)
    position = 0
    with localcontext() as exact:
        exact.traps[Inexact] = True
        while position < len(rest):
            term = _TERM.match(rest, position)
            if term is None:
                raise MalformedDurationError(f"invalid duration {text!r}")
            try:
                nanos += (
                    Decimal(term.group(1)) * _NANOS_PER_UNIT[term.group(2)]
                )
            except Inexact as ie:
                raise MalformedDurationError(
                    f"duration {text!r} has too many digits"
                ) from ie
            position = term.end()

    if nanos % 1000:
        raise MalformedDurationError(
            f"duration {text!r} is finer than a microsecond"
        )
    micros = int(nanos // 1000)
    try:
        return timedelta(microseconds=-micros if negative else micros)
    except OverflowError as oe:
        raise MalformedDurationError(f"duration {text!r} out of range") from oe


__all__ = [
    "MalformedDurationError",
    "durationFromDaprFormat",
    "durationToDaprFormat",
]
