import pytest

from agentflow.core import Document, Message


def test_message_equality_by_value():
    assert Message("user", "hi") == Message("user", "hi")
    assert Message("user", "hi") != Message("assistant", "hi")


def test_message_is_immutable():
    msg = Message("user", "hi")
    with pytest.raises(AttributeError):
        msg.content = "changed"
    assert msg.content == "hi"
    assert msg.role == "user"


def test_document_default_metadata_is_independent():
    first = Document("a")
    second = Document("b")
    first.metadata["source"] = "x"
    assert second.metadata == {}
    assert first.metadata == {"source": "x"}


def test_document_holds_content_and_metadata():
    doc = Document(page_content="text", metadata={"page": 2})
    assert doc.page_content == "text"
    assert doc.metadata["page"] == 2