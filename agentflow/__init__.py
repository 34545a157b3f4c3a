"""Composable building blocks for LLM agents: memory, loaders, embedders and chains."""

__version__ = "0.1.0"