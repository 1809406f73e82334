"""Input layer - Interactive key prompts and tab collection."""

from .console import prompt_for_key, read_until_sentinel

__all__ = [
    "prompt_for_key",
    "read_until_sentinel",
]
