"""Terminal rendering of a review.

Header, rules and footer go through ``Console.print`` as ``rich.text.Text``.
The model's reply does not: rich expands tabs and strips control characters
such as ``\\r`` when it renders text, so the body is split into marker and
non-marker pieces and written straight to ``console.file``. Only marker pieces
are ever wrapped in escape codes, and only when the console has a color
system; joining the pieces always gives back the reply exactly.
"""

from __future__ import annotations

import logging
import re

from rich.console import COLOR_SYSTEMS, Console
from rich.text import Text

from coderoast_core.models import ReviewResponse
from coderoast_core.prompts import Persona

logger = logging.getLogger(__name__)

RULE_WIDTH = 50
RULE_STYLE = "dim"
ATTRIBUTION = "Roasted with ❤️  by Claude"

# Marker glyph → style. "⚠️" includes the U+FE0F variation selector.
MARKER_STYLES: dict[str, str] = {
    "🔥": "red",
    "💡": "yellow",
    "✨": "green",
    "🚨": "bold red",
    "⚠️": "yellow",
    "✅": "green",
    "💀": "bold red",
    "💪": "cyan",
}

_MARKER_RE = re.compile("|".join(re.escape(marker) for marker in MARKER_STYLES))


def make_console(color: bool = True, stderr: bool = False) -> Console:
    """Return a Console for one invocation.

    ``color=False`` is plain-text mode: no color system, so no style (bold and
    italic included) produces an escape sequence, and the console is never
    treated as a terminal, so the spinner emits no cursor control either. The
    text written is the same as in color mode.
    """
    if color:
        return Console(stderr=stderr, highlight=False)
    return Console(stderr=stderr, highlight=False, color_system=None, no_color=True, force_terminal=False)


def split_markers(raw: str) -> list[tuple[str, str | None]]:
    """Split ``raw`` into ``(piece, style)`` pairs.

    Marker glyphs come back as their own pieces with their style; everything
    between them has style ``None``. ``"".join(piece for piece, _ in ...)`` is
    always ``raw``.
    """
    pieces: list[tuple[str, str | None]] = []
    position = 0
    for match in _MARKER_RE.finditer(raw):
        if match.start() > position:
            pieces.append((raw[position : match.start()], None))
        pieces.append((match.group(), MARKER_STYLES[match.group()]))
        position = match.end()
    if position < len(raw):
        pieces.append((raw[position:], None))
    return pieces


def _write_body(console: Console, raw: str) -> None:
    color_system = COLOR_SYSTEMS.get(console.color_system or "")
    chunks = []
    for piece, style_name in split_markers(raw):
        if style_name and color_system is not None:
            style = console.get_style(style_name)
            if console.no_color:
                style = style.without_color
            piece = style.render(piece, color_system=color_system)
        chunks.append(piece)
    chunks.append("\n")
    console.file.write("".join(chunks))
    console.file.flush()


def _rule() -> Text:
    return Text("─" * RULE_WIDTH, style=RULE_STYLE)


def render_header(console: Console, persona: Persona, file_name: str, language: str) -> None:
    console.print()
    console.print(Text(persona.title, style=persona.title_style))
    console.print(Text(f"{persona.subject_label}: {file_name} ({language})", style="dim"), soft_wrap=True)
    if persona.notice:
        console.print(Text(persona.notice, style=persona.notice_style or ""))
    console.print(_rule())


def render_review(
    console: Console,
    response: ReviewResponse,
    persona: Persona,
    file_name: str,
    language: str,
) -> None:
    """Write header, rule, colored review body, rule and footer to ``console``."""
    render_header(console, persona, file_name, language)
    console.print()
    _write_body(console, response.raw_text)
    console.print()
    console.print(_rule())
    if persona.attribution:
        console.print(Text(ATTRIBUTION, style="dim italic"))
    console.print()
    logger.debug("Rendered %s review (%d chars)", persona.mode.value, len(response.raw_text))
