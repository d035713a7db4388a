from actorwire.state import ActorStateSerializer

serializer = ActorStateSerializer()

# actor method results travel to the runtime wrapped in an envelope
payload = serializer.wrapData({"greeting": "hi"})
print(payload)

# and the runtime's responses are unwrapped into a requested type
print(serializer.unwrapData(payload, dict))
print(serializer.unwrapData("{}", dict))
