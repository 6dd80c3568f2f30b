from savereminder.core.events import EventBus


def test_event_bus_invokes_subscribers():
    bus = EventBus()
    received = []
    bus.subscribe("topic", lambda payload: received.append(payload))
    bus.emit("topic", 42)
    assert received == [42]


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    received = []
    handler = received.append
    bus.subscribe("topic", handler)
    bus.subscribe("topic", handler)
    bus.emit("topic", 1)
    bus.unsubscribe("topic", handler)
    bus.emit("topic", 2)
    assert received == [1]
