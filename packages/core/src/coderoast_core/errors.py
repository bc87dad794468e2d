"""Error taxonomy for a single roast invocation.

Every failure is fatal to the invocation. The CLI catches RoastError, prints
the message once to stderr and exits with status 1. Nothing in the core
package decides exit codes or retries.
"""

from __future__ import annotations


class RoastError(Exception):
    """Base class for every error the CLI reports and exits on."""


class InvalidSeverityError(RoastError):
    def __init__(self, severity: str, valid: tuple[str, ...]):
        self.severity = severity
        self.valid = valid
        super().__init__(f"Invalid severity level: {severity}")


class FileReadError(RoastError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class MissingCredentialError(RoastError):
    def __init__(self):
        super().__init__(
            "ANTHROPIC_API_KEY not found in environment.\n"
            "Get your key at: https://console.anthropic.com/settings/keys\n"
            'Then run: export ANTHROPIC_API_KEY="your-key-here"'
        )


class UpstreamRequestError(RoastError):
    """Raised for any failure reported by the completion service.

    The message is the provider's own; the original exception is chained as
    ``__cause__``.
    """
