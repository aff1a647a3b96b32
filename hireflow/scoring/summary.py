"""
Stored form of a score result.

After a candidate is scored the application keeps a single text field
on the candidate: the summary paragraph followed by a ``Strengths:``
and a ``Concerns:`` section, each list joined with ``"; "``.  That text
later doubles as the résumé text for matching when no résumé is stored.
"""

from __future__ import annotations

from typing import List, Tuple

from .schema import ScoreResult

SECTION_BREAK = "\n\n"
STRENGTHS_LABEL = "Strengths: "
CONCERNS_LABEL = "Concerns: "
ITEM_SEPARATOR = "; "


def format_ai_summary(result: ScoreResult) -> str:
    """Render a :class:`ScoreResult` as the stored summary text."""
    return (
        f"{result.summary}{SECTION_BREAK}"
        f"{STRENGTHS_LABEL}{ITEM_SEPARATOR.join(result.strengths)}{SECTION_BREAK}"
        f"{CONCERNS_LABEL}{ITEM_SEPARATOR.join(result.concerns)}"
    )


def _split_items(text: str) -> List[str]:
    return [item.strip() for item in text.split(ITEM_SEPARATOR) if item.strip()]


def parse_ai_summary(text: str) -> Tuple[str, List[str], List[str]]:
    """Split stored summary text into summary, strengths and concerns.

    Text that was not produced by :func:`format_ai_summary` comes back
    whole as the summary with empty lists.
    """
    summary_parts: List[str] = []
    strengths: List[str] = []
    concerns: List[str] = []
    for block in text.split(SECTION_BREAK):
        if block.startswith(STRENGTHS_LABEL):
            strengths = _split_items(block[len(STRENGTHS_LABEL):])
        elif block.startswith(CONCERNS_LABEL):
            concerns = _split_items(block[len(CONCERNS_LABEL):])
        else:
            summary_parts.append(block)
    return SECTION_BREAK.join(summary_parts).strip(), strengths, concerns


def resume_text_for(ai_summary: str | None, name: str) -> str:
    """Text to match a stored candidate with: the summary, else the name."""
    return ai_summary or name
