import pytest

from agentflow.chains.qa import QAChain, QAError, QAInput, QAOutput
from agentflow.core import Document


class FakeLLM:
    def __init__(self, reply="answer"):
        self.reply = reply
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        return self.reply


class FailingLLM:
    def complete(self, prompt):
        raise RuntimeError("down")


class FakeRetriever:
    def __init__(self, docs):
        self.docs = docs
        self.calls = []

    def retrieve(self, query, k):
        self.calls.append((query, k))
        return self.docs


class FailingRetriever:
    def retrieve(self, query, k):
        raise RuntimeError("no index")


DOCS = [Document("a", {"source": "doc1"}), Document("b", {"source": "doc2"})]


def test_run_returns_answer_and_sources():
    retriever = FakeRetriever(DOCS)
    out = QAChain(retriever, FakeLLM("answer"), 2).run("what?")
    assert out == QAOutput("answer", DOCS)
    assert retriever.calls == [("what?", 2)]


def test_custom_template_formats_documents():
    llm = FakeLLM()
    chain = QAChain(FakeRetriever(DOCS), llm)
    chain.prompt_template = "{context}|{question}"
    chain.run(QAInput("q"))
    assert llm.prompts == ["Document 1:\na\n\n---\n\nDocument 2:\nb|q"]


def test_default_prompt_holds_question_and_context():
    llm = FakeLLM()
    QAChain(FakeRetriever(DOCS), llm).run("why?")
    prompt = llm.prompts[0]
    assert "Question: why?" in prompt
    assert "Document 1:\na" in prompt
    assert prompt.endswith("Answer:")


def test_placeholders_in_question_not_expanded():
    llm = FakeLLM()
    chain = QAChain(FakeRetriever([]), llm)
    chain.prompt_template = "[{context}]{question}"
    chain.run("{context}")
    assert llm.prompts == ["[]{context}"]


def test_non_positive_k_uses_default():
    retriever = FakeRetriever([])
    QAChain(retriever, FakeLLM(), 0).run("q")
    assert retriever.calls == [("q", 3)]


def test_invalid_inputs():
    chain = QAChain(FakeRetriever([]), FakeLLM())
    with pytest.raises(TypeError):
        chain.run(5)
    with pytest.raises(ValueError):
        chain.run("")
    with pytest.raises(ValueError):
        chain.run(QAInput(""))


def test_failures_are_wrapped():
    with pytest.raises(QAError, match="retrieval failed"):
        QAChain(FailingRetriever(), FakeLLM()).run("q")
    with pytest.raises(QAError, match="completion failed"):
        QAChain(FakeRetriever(DOCS), FailingLLM()).run("q")