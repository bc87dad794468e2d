"""Request/response values for a single roast.

Both are created once per invocation and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass

from coderoast_core.config import DEFAULT_MAX_TOKENS
from coderoast_core.prompts import Mode


@dataclass(frozen=True)
class ReviewRequest:
    """Everything needed to build the one outbound message."""

    file_path: str
    source_text: str  # exact file content, no normalization
    language: str
    mode: Mode
    model: str
    max_tokens: int = DEFAULT_MAX_TOKENS


@dataclass(frozen=True)
class ReviewResponse:
    raw_text: str
    model: str = ""
