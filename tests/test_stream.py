from agentflow.util.stream import EventStream


def test_non_positive_buffer_becomes_one():
    assert EventStream(0).capacity == 1
    assert EventStream(-4).capacity == 1


def test_events_drain_in_order():
    stream = EventStream(3)
    for event in ("a", "b", "c"):
        stream.write(event)
    assert list(stream.drain()) == ["a", "b", "c"]
    assert list(stream.drain()) == []


def test_full_buffer_drops_new_events():
    stream = EventStream(2)
    assert stream.try_emit(1) is True
    assert stream.try_emit(2) is True
    assert stream.try_emit(3) is False
    assert list(stream.drain()) == [1, 2]


def test_closed_stream_drops_events_but_keeps_buffered():
    stream = EventStream(4)
    stream.write("kept")
    stream.close()
    assert stream.closed is True
    assert stream.try_emit("dropped") is False
    assert list(stream.drain()) == ["kept"]


def test_close_is_idempotent():
    stream = EventStream(1)
    stream.close()
    stream.close()
    assert stream.closed is True
    assert len(stream) == 0


def test_room_frees_after_drain():
    stream = EventStream(1)
    stream.write("x")
    assert list(stream.drain()) == ["x"]
    assert stream.try_emit("y") is True
    assert len(stream) == 1