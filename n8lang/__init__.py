"""Tokenizer, parser, syntax tree and library helpers for the N8 scripting language."""

__version__ = "0.1.0"