import pytest

from agentflow.core import Message
from agentflow.memory.entity import EntityMemory
from agentflow.memory.inmemory import InMemoryMemory


@pytest.fixture
def mem():
    return EntityMemory(InMemoryMemory())


def test_extracts_proper_nouns(mem):
    mem.add_message(
        Message("user", "Hello, I'm Alice Smith from San Francisco. I met Bob Johnson yesterday.")
    )
    entities = mem.get_entities()
    assert {"Alice Smith", "San Francisco", "Bob Johnson", "Hello"} <= set(entities)
    assert entities["Alice Smith"].entity_type == "unknown"
    assert entities["Alice Smith"].mentions == 1


def test_repeated_mentions_are_counted(mem):
    mem.add_message(Message("user", "Tokyo is big."))
    mem.add_message(Message("assistant", "Tokyo is lovely."))
    assert mem.get_entities()["Tokyo"].mentions == 2
    assert mem.get_entities()["Tokyo"].last_mention == "Tokyo is lovely."


def test_extracts_dates(mem):
    mem.add_message(Message("user", "we ship on 2024-01-15 or maybe March 3, 2024"))
    entities = mem.get_entities()
    assert entities["2024-01-15"].entity_type == "date"
    assert entities["March 3, 2024"].entity_type == "date"


def test_last_mention_is_truncated(mem):
    text = "Paris " + "x" * 300
    mem.add_message(Message("user", text))
    assert mem.get_entities()["Paris"].last_mention == text[:100]


def test_messages_prefixed_with_entity_summary(mem):
    mem.add_message(Message("user", "I like Berlin"))
    messages = mem.get_messages()
    assert messages[0].role == "system"
    assert messages[0].content.startswith("[Known Entities]\n")
    assert "- Berlin (unknown): mentioned 1 times" in messages[0].content
    assert messages[1:] == [Message("user", "I like Berlin")]


def test_no_entities_no_prefix(mem):
    mem.add_message(Message("user", "nothing capitalised here"))
    assert mem.get_messages() == [Message("user", "nothing capitalised here")]


def test_add_entity_manually(mem):
    mem.add_entity("Acme", "organisation", "a company")
    info = mem.get_entities()["Acme"]
    assert (info.entity_type, info.summary, info.mentions) == ("organisation", "a company", 1)
    mem.add_entity("Acme", "organisation", "a big company")
    assert mem.get_entities()["Acme"].mentions == 2
    assert " - a big company" in mem.get_messages()[0].content


def test_add_entity_empty_name_raises(mem):
    with pytest.raises(ValueError):
        mem.add_entity("", "person", "")


def test_get_entities_returns_copies(mem):
    mem.add_message(Message("user", "Rome"))
    copy = mem.get_entities()
    copy["Rome"].mentions = 99
    assert mem.get_entities()["Rome"].mentions == 1


def test_key_value_delegates_to_inner():
    inner = InMemoryMemory()
    mem = EntityMemory(inner)
    mem.set("k", "v")
    assert inner.get("k") == "v"
    assert mem.get("k") == "v"