"""Core roast orchestration.

One invocation walks a single linear path:

    validate → read file → check credential → request (spinner) → render

Any step may raise a RoastError; nothing is printed before the response has
arrived, so a failure leaves only the CLI's error line on the terminal.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console

from coderoast_core.errors import FileReadError, MissingCredentialError
from coderoast_core.models import ReviewRequest, ReviewResponse
from coderoast_core.progress import analyzing
from coderoast_core.prompts import Mode, get_persona, select_mode
from coderoast_core.providers.anthropic import AnthropicRoaster
from coderoast_core.providers.base import BaseRoaster
from coderoast_core.render import render_review
from coderoast_core.utils.language import detect_language

logger = logging.getLogger(__name__)


def _get_roaster(config: dict) -> BaseRoaster:
    api_key = config.get("anthropic_api_key")
    if not api_key:
        raise MissingCredentialError()
    return AnthropicRoaster(api_key=api_key)


def read_source(file_path: str) -> str:
    """Return the file's text exactly as stored.

    ``newline=""`` keeps CRLF/CR line endings untouched.
    """
    try:
        with open(file_path, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileReadError(file_path, f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise FileReadError(file_path, e.strerror or str(e)) from e


def build_request(file_path: str, source: str, mode: Mode, config: dict) -> ReviewRequest:
    language = detect_language(file_path)
    logger.debug("Detected language %r for %s", language, file_path)
    return ReviewRequest(
        file_path=file_path,
        source_text=source,
        language=language,
        mode=mode,
        model=config["model"],
        max_tokens=config["max_tokens"],
    )


def run_roast(file_path: str, config: dict, console: Console) -> ReviewResponse:
    """Review ``file_path`` and print the result to ``console``.

    Severity is validated before the file is touched, and the credential is
    checked before any network I/O.
    """
    mode = select_mode(config.get("serious", False), config.get("severity", "medium"))
    source = read_source(file_path)
    roaster = _get_roaster(config)
    request = build_request(file_path, source, mode, config)

    with analyzing(console):
        response = roaster.roast(request)

    render_review(
        console,
        response,
        get_persona(request.mode),
        file_name=os.path.basename(file_path),
        language=request.language,
    )
    return response
