import pytest

from agentflow.core import Message
from agentflow.memory.llmsummarizer import (
    DEFAULT_SYSTEM_PROMPT,
    FALLBACK_SYSTEM_PROMPT,
    LLMSummarizer,
    SummarizationError,
)


class FakeLLM:
    def __init__(self, reply="  the summary  ", fail=False):
        self.reply = reply
        self.fail = fail
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise RuntimeError("boom")
        return self.reply


def test_summarize_strips_reply():
    llm = FakeLLM()
    result = LLMSummarizer(llm).summarize([Message("user", "hi")])
    assert result == "the summary"


def test_prompt_layout():
    llm = FakeLLM()
    LLMSummarizer(llm).summarize([Message("user", "hi"), Message("assistant", "hello")])
    prompt = llm.prompts[0]
    assert prompt.startswith(DEFAULT_SYSTEM_PROMPT + "\n\nConversation to summarize:\n---\n")
    assert "user: hi\nassistant: hello\n---\n\n" in prompt
    assert prompt.endswith("Summary:")


def test_empty_messages_skip_llm():
    llm = FakeLLM()
    assert LLMSummarizer(llm).summarize([]) == ""
    assert llm.prompts == []


def test_llm_error_is_wrapped():
    with pytest.raises(SummarizationError, match="summarization failed"):
        LLMSummarizer(FakeLLM(fail=True)).summarize([Message("user", "hi")])


def test_custom_and_empty_prompts():
    assert LLMSummarizer(FakeLLM(), "custom").system_prompt == "custom"
    assert LLMSummarizer(FakeLLM(), "").system_prompt == FALLBACK_SYSTEM_PROMPT


def test_setter_ignores_empty_prompt():
    summarizer = LLMSummarizer(FakeLLM())
    summarizer.system_prompt = ""
    assert summarizer.system_prompt == DEFAULT_SYSTEM_PROMPT
    summarizer.system_prompt = "short"
    llm = FakeLLM()
    summarizer._llm = llm
    summarizer.summarize([Message("user", "x")])
    assert llm.prompts[0].startswith("short\n\n")