"""
Shared utilities for the resume reviewer.

Common functionality used across contexts:
- Settings loading
- Logger setup
- LLM providers
- PDF processing
"""

from reviewer.utils.exceptions import ReviewerError
from reviewer.utils.settings import load_settings

__all__ = ["ReviewerError", "load_settings"]
