import os
from typing import Optional

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_MAX_TOKENS = 2048

DEFAULT_CONFIG: dict = {
    "model": DEFAULT_MODEL,
    "max_tokens": DEFAULT_MAX_TOKENS,
    "severity": "medium",
    "serious": False,
    "color": True,
}


def load_config(cli_overrides: Optional[dict] = None) -> dict:
    """
    Build the configuration for one invocation by merging (in order of precedence):
      1. Built-in defaults
      2. CLI argument overrides (None values are ignored)

    The API key is read from the environment here, once, and threaded through
    to the client from the returned dict.
    """
    config = dict(DEFAULT_CONFIG)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    config["anthropic_api_key"] = os.environ.get("ANTHROPIC_API_KEY") or None

    return config
