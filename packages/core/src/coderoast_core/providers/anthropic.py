from __future__ import annotations

import anthropic
from anthropic.types import TextBlock

from coderoast_core.errors import UpstreamRequestError
from coderoast_core.providers.base import BaseRoaster


class AnthropicRoaster(BaseRoaster):
    def __init__(self, api_key: str):
        self.client = anthropic.Anthropic(api_key=api_key)

    def _call_api(self, model: str, messages: list[dict], max_tokens: int) -> str:
        try:
            response = self.client.messages.create(
                model=model,
                max_tokens=max_tokens,
                messages=messages,
            )
        except anthropic.APIError as e:
            raise UpstreamRequestError(str(e)) from e

        # Only the first content block is the review.
        blocks = response.content or []
        if not blocks or not isinstance(blocks[0], TextBlock):
            raise UpstreamRequestError(f"Unexpected response from {model}: no text content returned.")
        return blocks[0].text
