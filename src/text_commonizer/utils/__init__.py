"""Shared utilities: structured logging and codepoint helpers."""
