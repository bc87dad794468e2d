"""Base roaster implementing the Template Method pattern.

Every provider shares the same request flow:
    roast() → build_messages() → _call_api()   ← only this differs per provider
            → ReviewResponse

Subclasses implement two things only:
  - __init__: validate and store the SDK client
  - _call_api: make one raw API call and return the text response

No retries: one invocation is one round trip and a failed call is reported
as-is.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from coderoast_core.config import DEFAULT_MAX_TOKENS
from coderoast_core.models import ReviewRequest, ReviewResponse
from coderoast_core.prompts import get_persona

logger = logging.getLogger(__name__)

def fenced_code_block(language: str, source: str) -> str:
    """Wrap ``source`` in a triple-backtick fence tagged with ``language``.

    The source is embedded verbatim; backticks inside it are not escaped.
    """
    return f"```{language}\n{source}\n```"


def build_prompt(template: str, language: str, source: str) -> str:
    return f"{template}\n\n{fenced_code_block(language, source)}"


def build_messages(request: ReviewRequest) -> list[dict]:
    """Return the single-turn message list for ``request``."""
    template = get_persona(request.mode).prompt
    prompt = build_prompt(template, request.language, request.source_text)
    return [{"role": "user", "content": prompt}]


class BaseRoaster(ABC):
    MAX_TOKENS: int = DEFAULT_MAX_TOKENS

    # ------------------------------------------------------------------ #
    # Public interface                                                     #
    # ------------------------------------------------------------------ #

    def roast(self, request: ReviewRequest) -> ReviewResponse:
        """Send ``request`` once and return the model's reply.

        Failures from the provider propagate unchanged in meaning (as
        UpstreamRequestError); no partial response is ever returned.
        """
        messages = build_messages(request)
        max_tokens = request.max_tokens or self.MAX_TOKENS
        logger.debug(
            "%s: sending %d-char prompt to %s (max_tokens=%d)",
            self.__class__.__name__,
            len(messages[0]["content"]),
            request.model,
            max_tokens,
        )
        raw = self._call_api(request.model, messages, max_tokens)
        logger.debug("%s: received %d chars", self.__class__.__name__, len(raw))
        return ReviewResponse(raw_text=raw, model=request.model)

    # ------------------------------------------------------------------ #
    # Abstract: implement in each provider                                #
    # ------------------------------------------------------------------ #

    @abstractmethod
    def _call_api(self, model: str, messages: list[dict], max_tokens: int) -> str:
        """Make a single API call and return the first text block of the reply.

        Must raise UpstreamRequestError on any provider failure.
        """
