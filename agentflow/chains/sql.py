"""Generating SQL queries from natural-language questions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Protocol

DEFAULT_DIALECT = "SQL"
DEFAULT_SQL_PROMPT = (
    "You are a SQL query generator. Generate a {dialect} query to answer the user's question.\n\n"
    "Database Schema:\n{schema}\n\n"
    "User Question: {question}\n\n"
    "Generate the SQL query. If you need to provide an explanation, put it before the SQL "
    "wrapped in triple backtick blocks.\n\n"
    "SQL Query:"
)
_OPEN_FENCE = "```sql"
_CLOSE_FENCE = "```"


class LLM(Protocol):
    def complete(self, prompt: str) -> str: ...


class SQLError(RuntimeError):
    """Raised when the LLM fails to produce a query."""


def _fill(template: str, values: Mapping[str, str]) -> str:
    """Replace every placeholder in one pass; inserted text is not rescanned."""
    pattern = re.compile("|".join(re.escape(key) for key in values))
    return pattern.sub(lambda m: values[m.group()], template)


def extract_sql(response: str) -> tuple[str, str]:
    """Split an LLM response into ``(sql, explanation)``.

    A fenced ```sql block supplies the query; the text around it, each side
    stripped and joined directly, is the explanation. Otherwise the whole
    stripped response is the query.
    """
    start = response.find(_OPEN_FENCE)
    if start >= 0:
        body_start = start + len(_OPEN_FENCE)
        end = response.find(_CLOSE_FENCE, body_start)
        if end >= 0:
            sql = response[body_start:end].strip()
            explanation = response[:start].strip() + response[end + len(_CLOSE_FENCE):].strip()
            return sql, explanation
    return response.strip(), ""


@dataclass
class SQLInput:
    question: str
    schema: str = ""


@dataclass
class SQLOutput:
    sql: str
    explanation: str = ""


class SQLChain:
    """Asks an LLM for a query in ``dialect`` against a described schema."""

    def __init__(self, llm: LLM, schema: str = "", dialect: str = DEFAULT_DIALECT) -> None:
        self.llm = llm
        self.schema = schema
        self.dialect = dialect
        self.prompt_template = DEFAULT_SQL_PROMPT

    def run(self, input: str | SQLInput) -> SQLOutput:
        """Generate a query; a schema given in the input overrides the chain's."""
        schema = self.schema
        if isinstance(input, str):
            question = input
        elif isinstance(input, SQLInput):
            question = input.question
            if input.schema:
                schema = input.schema
        else:
            raise TypeError(f"expected string or SQLInput, got {type(input).__name__}")
        if not question:
            raise ValueError("question cannot be empty")
        if not schema:
            raise ValueError("database schema is required")

        prompt = _fill(
            self.prompt_template,
            {"{dialect}": self.dialect, "{schema}": schema, "{question}": question},
        )
        try:
            response = self.llm.complete(prompt)
        except Exception as exc:
            raise SQLError(f"SQL generation failed: {exc}") from exc
        sql, explanation = extract_sql(response)
        return SQLOutput(sql, explanation)