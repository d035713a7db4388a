from dataclasses import dataclass
from datetime import timedelta

from actorwire.descriptors import TimerDescriptor
from actorwire.state import ActorStateSerializer


@dataclass
class Counter:
    count: int


serializer = ActorStateSerializer()

# register a timer that fires every 10 seconds, starting in 5
timer = TimerDescriptor(
    timedelta(seconds=5), timedelta(seconds=10), "onTick", Counter(3)
)
print(serializer.serializeToString(timer))

# a timer with no state leaves "data" out
once = TimerDescriptor(timedelta(minutes=1), timedelta(0), "once")
print(serializer.serializeToString(once))
