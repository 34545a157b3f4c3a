import pytest

from agentflow.core import Message
from agentflow.memory.buffer import BufferMemory
from agentflow.memory.inmemory import InMemoryMemory
from agentflow.memory.llmsummarizer import SummarizationError
from agentflow.memory.summary import SummaryMemory


class FakeSummarizer:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def summarize(self, messages):
        if self.fail:
            raise RuntimeError("nope")
        self.calls.append(list(messages))
        return "S" + str(len(messages))


def _msgs(n):
    return [Message("user", f"m{i}") for i in range(n)]


def test_no_summary_below_window():
    summarizer = FakeSummarizer()
    mem = SummaryMemory(InMemoryMemory(), summarizer, 3)
    for msg in _msgs(3):
        mem.add_message(msg)
    assert summarizer.calls == []
    assert mem.get_messages() == _msgs(3)
    assert mem.get_summary() == ""


def test_summarizes_older_messages():
    summarizer = FakeSummarizer()
    mem = SummaryMemory(InMemoryMemory(), summarizer, 2)
    msgs = _msgs(3)
    for msg in msgs:
        mem.add_message(msg)
    assert summarizer.calls == [msgs[:1]]
    result = mem.get_messages()
    assert result[0] == Message("system", "[Conversation Summary]\n" + mem.get_summary())
    assert result[1:] == msgs


def test_summary_stored_under_default_key():
    mem = SummaryMemory(InMemoryMemory(), FakeSummarizer(), 1)
    for msg in _msgs(2):
        mem.add_message(msg)
    assert mem.get("conversation_summary") == mem.get_summary()


def test_custom_summary_key():
    mem = SummaryMemory(InMemoryMemory(), FakeSummarizer(), 1)
    mem.summary_key = "sk"
    for msg in _msgs(2):
        mem.add_message(msg)
    assert mem.get("sk") == mem.get_summary()
    assert mem.get("conversation_summary") is None


def test_default_window_size():
    summarizer = FakeSummarizer()
    mem = SummaryMemory(InMemoryMemory(), summarizer, 0)
    assert mem.window_size == 10
    for msg in _msgs(11):
        mem.add_message(msg)
    assert len(summarizer.calls) == 1


def test_no_summarizer_keeps_plain_messages():
    mem = SummaryMemory(InMemoryMemory(), None, 1)
    for msg in _msgs(4):
        mem.add_message(msg)
    assert mem.get_messages() == _msgs(4)


def test_summarizer_error_raises():
    mem = SummaryMemory(InMemoryMemory(), FakeSummarizer(fail=True), 1)
    mem.add_message(Message("user", "a"))
    with pytest.raises(SummarizationError):
        mem.add_message(Message("user", "b"))


def test_missing_key_on_strict_inner():
    mem = SummaryMemory(BufferMemory(), None, 5)
    mem.add_message(Message("user", "a"))
    assert mem.get_messages() == [Message("user", "a")]
    with pytest.raises(KeyError):
        mem.get_summary()


def test_set_get_delegate():
    inner = InMemoryMemory()
    mem = SummaryMemory(inner, None)
    mem.set("k", 5)
    assert inner.get("k") == 5
    assert mem.get("k") == 5