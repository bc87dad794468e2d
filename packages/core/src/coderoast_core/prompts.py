"""Fixed prompt catalog.

Each review mode is a closed, immutable Persona: the instruction text sent to
the model plus the header metadata the renderer prints for it. Nothing here is
built from user input; the CLI only chooses which Persona to use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from coderoast_core.errors import InvalidSeverityError

logger = logging.getLogger(__name__)

SEVERITIES = ("mild", "medium", "harsh")
DEFAULT_SEVERITY = "medium"


class Mode(str, Enum):
    SERIOUS = "serious"
    MILD = "mild"
    MEDIUM = "medium"
    HARSH = "harsh"


MILD_ROAST_PROMPT = """You're a friendly senior developer reviewing code. Your job:

1. Point out real issues gently (bugs, anti-patterns, performance problems)
2. Be encouraging and constructive - focus on learning opportunities
3. Use light humor, keep it warm and supportive
4. Be specific - quote the actual code you're mentioning
5. End with genuine compliments and helpful tips

Style: Like a supportive mentor at code review. Constructive feedback with a smile.

Format your response with:
- 💡 for suggestions and improvements
- ✨ for compliments and good practices
- 🚨 for serious bugs (if any)
- 💪 for encouragement

Keep it under 400 words. Keep it positive."""

MEDIUM_ROAST_PROMPT = """You're a senior developer with a sharp wit reviewing code. Your job:

1. Point out real issues (bugs, anti-patterns, performance problems, security holes)
2. Be funny but not mean - roast the code, not the person
3. Use developer humor (not corporate AI cheerleader vibes)
4. Be specific - quote the actual code you're roasting
5. End with 1-2 genuine compliments or useful tips

Style: Like a sarcastic but helpful senior dev at code review. \
Think "Gordon Ramsay for code" but constructive.

Format your response with:
- 🔥 for roasts/issues
- 💡 for suggestions
- ✨ for compliments
- 🚨 for serious bugs

Keep it under 400 words. Make it shareable."""

HARSH_ROAST_PROMPT = """You're a brutally honest senior developer with zero patience for bad code. Your job:

1. Ruthlessly point out every issue (bugs, anti-patterns, performance disasters, security nightmares)
2. Be savage - this code needs to know what it did wrong
3. Use cutting developer humor (think "your code is so bad, it makes PHP look elegant")
4. Be specific - quote the crimes against programming
5. Maybe end with ONE backhanded compliment if you can find something

Style: Like Gordon Ramsay at his angriest, but for code. No mercy. Pure fire.

Format your response with:
- 🔥🔥🔥 for roasts (triple fire for triple pain)
- 💀 for code that should be deleted
- 🚨 for serious bugs
- 💡 for "how did you not know this?"

Keep it savage. Keep it under 400 words. No holding back."""

SERIOUS_PROMPT = """You're a senior developer conducting a professional code review. Analyze this code for:

1. Bugs and potential runtime errors
2. Security vulnerabilities
3. Performance issues
4. Code quality and maintainability
5. Best practices for the language/framework

Be thorough but concise. Format your response with:
- 🚨 Critical issues (security, bugs)
- ⚠️  Warnings (performance, code smell)
- 💡 Suggestions (improvements, best practices)
- ✅ Good practices observed

Keep it actionable and under 400 words."""


@dataclass(frozen=True)
class Persona:
    """A review mode's prompt together with how its output is introduced."""

    mode: Mode
    prompt: str
    title: str
    title_style: str
    subject_label: str  # "File" | "Victim"
    notice: str | None = None
    notice_style: str | None = None
    attribution: bool = True


PERSONAS: dict[Mode, Persona] = {
    Mode.SERIOUS: Persona(
        mode=Mode.SERIOUS,
        prompt=SERIOUS_PROMPT,
        title="📋 Professional Code Review",
        title_style="bold blue",
        subject_label="File",
        attribution=False,
    ),
    Mode.MILD: Persona(
        mode=Mode.MILD,
        prompt=MILD_ROAST_PROMPT,
        title="😊 CODE REVIEW (Be Nice Mode)",
        title_style="bold yellow",
        subject_label="Victim",
        notice="✨ Friendly feedback mode",
        notice_style="green",
    ),
    Mode.MEDIUM: Persona(
        mode=Mode.MEDIUM,
        prompt=MEDIUM_ROAST_PROMPT,
        title="🔥 CODE ROAST 🔥",
        title_style="bold red",
        subject_label="Victim",
    ),
    Mode.HARSH: Persona(
        mode=Mode.HARSH,
        prompt=HARSH_ROAST_PROMPT,
        title="💀 CODE EXECUTION 💀",
        title_style="bold red",
        subject_label="Victim",
        notice="⚠️  WARNING: Brutally honest mode enabled",
        notice_style="red",
    ),
}


def validate_severity(severity: str) -> str:
    """Return ``severity`` unchanged or raise InvalidSeverityError.

    Exact match only: "Mild" or " mild" are rejected, never defaulted.
    """
    if severity not in SEVERITIES:
        raise InvalidSeverityError(severity, SEVERITIES)
    return severity


def select_mode(serious: bool, severity: str = DEFAULT_SEVERITY) -> Mode:
    """Choose the review mode. Serious wins over any (valid) severity."""
    validate_severity(severity)
    mode = Mode.SERIOUS if serious else Mode(severity)
    logger.debug("Selected review mode %s (serious=%s, severity=%s)", mode.value, serious, severity)
    return mode


def get_persona(mode: Mode) -> Persona:
    return PERSONAS[mode]
