# agentflow

Composable building blocks for applications built around large language
models. Every piece is small, explicit and swappable:

- **Memory** – conversation state with a key/value store on the side:
  plain in-memory, fixed-size buffer, token-aware window, entity tracking,
  LLM-backed summarisation and compression wrappers, and a Redis backend.
- **Loaders** – turn text, CSV and HTML files or web pages into `Document`
  objects, combine several loaders, and feed the results into memory.
- **Splitters** – cut documents into overlapping chunks before embedding.
- **Embedders** – OpenAI, Cohere and HuggingFace flavoured embedders that
  report the vector dimension of their model.
- **Chains** – ready-made question answering, summarisation, SQL generation
  and agent orchestration on top of any LLM object with a `complete` method.

## Installation

```
pip install agentflow
```

The Redis memory backend needs a reachable Redis server; everything else
works without any service running.

## Core types

```python
from agentflow.core import Document, Message

msg = Message(role="user", content="Hello there")
doc = Document(page_content="Some text", metadata={"source": "notes.txt"})
```

## Memory

All memory backends share the same surface: `add_message`, `get_messages`,
`set` and `get`.

| Class | Module | Behaviour |
| --- | --- | --- |
| `InMemoryMemory` | `agentflow.memory.inmemory` | keeps every message |
| `BufferMemory` | `agentflow.memory.buffer` | keeps the last N messages |
| `WindowMemory` | `agentflow.memory.window` | keeps messages within a token budget |
| `EntityMemory` | `agentflow.memory.entity` | tracks proper nouns and dates in messages |
| `SummaryMemory` | `agentflow.memory.summary` | summarises older messages with a summariser |
| `CompressiveMemory` | `agentflow.memory.compressive` | compresses history once past a threshold |
| `RedisMemory` | `agentflow.memory.redis_memory` | persists messages and values in Redis |

`LLMSummarizer` in `agentflow.memory.llmsummarizer` turns any LLM into the
summariser that `SummaryMemory` expects. `total_tokens` in
`agentflow.memory.window` gives the word-based token estimate used by the
window memory (about 1.3 tokens per word, at least one per message).

## Loading and splitting documents

- `TextLoader` and `CSVLoader` (`agentflow.loader.files`) read local files.
- `HTMLLoader` (`agentflow.loader.html`) strips markup and keeps the page
  title; `extract_html_text` does the same for a string of HTML.
- `URLLoader` and `HTMLURLLoader` (`agentflow.loader.url`) fetch pages.
- `MultiLoader` and `LoaderChain` (`agentflow.loader.base`) combine loaders
  or use one as the first step of a pipeline.
- `inject_into_memory` and `inject_into_state` (`agentflow.loader.inject`)
  hand loaded documents to memory or shared state.

`CharacterSplitter` and `RecursiveCharacterSplitter`
(`agentflow.loader.splitter`) cut text or whole document lists into
overlapping chunks while keeping each document's metadata.

## Embeddings

`OpenAIEmbedder`, `CohereEmbedder` and `HuggingFaceEmbedder`
(`agentflow.embeddings`) provide `embed` for one text and `embed_batch` for
several; an empty batch is an error.

## Chains

- `QAChain` (`agentflow.chains.qa`) retrieves documents and answers a
  question from them, returning a `QAOutput` with the answer and sources.
- `SummarizationChain` (`agentflow.chains.summarization`) summarises text,
  lists of text or documents with the "stuff" or "map_reduce" `Strategy`.
- `SQLChain` (`agentflow.chains.sql`) generates SQL from a question and a
  schema description and returns an `SQLOutput`; `extract_sql` pulls the
  query out of a model reply.
- `AgentChain` (`agentflow.chains.agent`) combines an LLM with memory,
  an optional retriever and registered tools.

## Utilities

- `exponential` (`agentflow.util.backoff`) builds a capped exponential
  delay function for retries.
- `new_key` (`agentflow.util.idempotency`) creates random idempotency keys.
- `EventStream` (`agentflow.util.stream`) is a bounded, non-blocking event
  buffer that drops events when full or closed.
- `LoggingAdapter` (`agentflow.util.logger`) offers printf-style logging
  on top of the standard `logging` module.

## Running the tests

```
pip install "agentflow[test]"
pytest
```