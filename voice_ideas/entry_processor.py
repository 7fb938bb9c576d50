"""
Entry processor.

Turns a sequence of voice entries into tag frequencies and a list of
detected ideas in a single pass. Pure: no I/O, no shared state, never
raises for well-formed entries.
"""

from collections.abc import Sequence
from typing import Optional

from voice_ideas.models.entry import VoiceEntry
from voice_ideas.models.idea import IdeaRecord, ProcessedResult
from voice_ideas.semantic.rules import (
    resolve_belief_level,
    resolve_category,
    resolve_due_date,
    resolve_origin_type,
    resolve_refinement_level,
    resolve_status,
    resolve_tone,
)
from voice_ideas.semantic.triggers import detect_triggers
from voice_ideas.utils.logger import get_logger

logger = get_logger(__name__)

SUMMARY_TEMPLATE = "Analysis of {total} entries found {ideas} potential ideas"


def format_summary(total_entries: int, idea_count: int) -> str:
    """Render the summary line for a classification pass."""
    return SUMMARY_TEMPLATE.format(total=total_entries, ideas=idea_count)


def extract_idea(entry: VoiceEntry) -> Optional[IdeaRecord]:
    """
    Build an idea record for an entry, if it contains one.

    Args:
        entry: Voice entry to inspect

    Returns:
        IdeaRecord when any idea trigger fires, otherwise None
    """
    text = entry.transcript_user.lower()
    triggers = detect_triggers(text)
    if not triggers.is_idea:
        return None

    return IdeaRecord(
        task_text=entry.transcript_user,
        status=resolve_status(text),
        category=resolve_category(text),
        due_date=resolve_due_date(text),
        origin_type=resolve_origin_type(triggers),
        tone=resolve_tone(entry.emotion_score_score),
        refinement_level=resolve_refinement_level(text),
        belief_level=resolve_belief_level(text),
    )


def process_entries(entries: Sequence[VoiceEntry]) -> ProcessedResult:
    """
    Analyze voice entries for tag frequencies and potential ideas.

    Args:
        entries: Entries in source order

    Returns:
        ProcessedResult with the summary line, tag frequencies and the
        ideas in the same relative order as their source entries
    """
    tag_frequencies: dict[str, int] = {}
    ideas: list[IdeaRecord] = []

    for entry in entries:
        for tag in entry.tags_user:
            tag_frequencies[tag] = tag_frequencies.get(tag, 0) + 1

        idea = extract_idea(entry)
        if idea is not None:
            ideas.append(idea)

    logger.debug(
        "Processed %d entries: %d ideas, %d distinct tags",
        len(entries),
        len(ideas),
        len(tag_frequencies),
    )

    return ProcessedResult(
        summary=format_summary(len(entries), len(ideas)),
        tag_frequencies=tag_frequencies,
        ideas=ideas,
    )
