import pytest

from agentflow.core import Document
from agentflow.loader.base import LoaderChain, LoaderError, MultiLoader


class _StaticLoader:
    def __init__(self, *docs):
        self.docs = list(docs)
        self.calls = 0

    def load(self):
        self.calls += 1
        return list(self.docs)


class _FailingLoader:
    def load(self):
        raise LoaderError("source unavailable")


def test_multi_loader_concatenates_in_order():
    first = _StaticLoader(Document("one"), Document("two"))
    second = _StaticLoader(Document("three"))
    docs = MultiLoader(first, second).load()
    assert [d.page_content for d in docs] == ["one", "two", "three"]


def test_multi_loader_without_loaders_is_empty():
    assert MultiLoader().load() == []


def test_multi_loader_propagates_errors():
    ok = _StaticLoader(Document("one"))
    with pytest.raises(LoaderError, match="source unavailable"):
        MultiLoader(ok, _FailingLoader()).load()


def test_multi_loader_stops_at_first_failure():
    later = _StaticLoader(Document("never"))
    with pytest.raises(LoaderError):
        MultiLoader(_FailingLoader(), later).load()
    assert later.calls == 0


def test_multi_loader_exposes_loaders():
    a = _StaticLoader()
    b = _StaticLoader()
    assert MultiLoader(a, b).loaders == [a, b]


def test_loader_chain_ignores_input():
    doc = Document("content", {"source": "memory"})
    chain = LoaderChain(_StaticLoader(doc))
    assert chain.run("anything") == [doc]
    assert chain.run() == [doc]


def test_loader_chain_propagates_errors():
    with pytest.raises(LoaderError):
        LoaderChain(_FailingLoader()).run(None)