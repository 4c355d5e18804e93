"""Prompt logic for terminals: line editing, key actions, parsing, formatting and confirmation."""

__version__ = "0.1.0"