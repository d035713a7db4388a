from __future__ import annotations

import sys

from actorwire.descriptors import ReminderDescriptor
from actorwire.durations import durationFromDaprFormat
from actorwire.state import ActorStateSerializer

serializer = ActorStateSerializer()


# outbound: the body of a register-reminder request
def registerBody(dueTime: str, period: str, data: str | None) -> str | None:
    reminder = ReminderDescriptor(
        durationFromDaprFormat(dueTime), durationFromDaprFormat(period), data
    )
    return serializer.serializeToString(reminder)


# inbound: the runtime hands a reminder back inside an envelope
def fromRuntime(payload: str) -> ReminderDescriptor | None:
    return serializer.unwrapData(payload, ReminderDescriptor)


if __name__ == "__main__":
    args = sys.argv[1:]
    dueTime, period = (args + ["5s", "1h"])[:2]
    data = " ".join(args[2:]) or None
    body = registerBody(dueTime, period, data)
    print(body)
    echoed = fromRuntime(serializer.wrapData(body) or "{}")
    assert echoed is not None
    print(echoed)
