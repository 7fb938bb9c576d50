"""
Idea triggers for transcript analysis.

An entry counts as an idea when any of three keyword triggers fires on
its lower-cased transcript: idea verbs, idea phrases or future intent.
"""

from pydantic import BaseModel, ConfigDict


IDEA_VERBS: tuple[str, ...] = (
    "build",
    "create",
    "start",
    "try",
    "make",
    "develop",
    "design",
    "launch",
)

IDEA_PHRASES: tuple[str, ...] = (
    "just thought of",
    "what if",
    "idea for",
    "thinking about",
    "occurred to me",
    "imagine if",
    "how about",
)

FUTURE_INTENT_PHRASES: tuple[str, ...] = (
    "going to",
    "plan to",
    "want to",
    "would like to",
    "intend to",
)


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    """Check whether any keyword occurs in text as a substring."""
    return any(keyword in text for keyword in keywords)


class IdeaTriggers(BaseModel):
    """Which idea triggers fired for a transcript."""

    model_config = ConfigDict(frozen=True)

    has_idea_verbs: bool = False
    has_idea_phrases: bool = False
    has_future_intent: bool = False

    @property
    def is_idea(self) -> bool:
        """True when at least one trigger fired."""
        return self.has_idea_verbs or self.has_idea_phrases or self.has_future_intent


def detect_triggers(text: str) -> IdeaTriggers:
    """
    Evaluate the idea triggers on a transcript.

    Matching is case-insensitive plain substring matching, so "try"
    also fires inside "country".

    Args:
        text: Transcript text, any case

    Returns:
        IdeaTriggers with one flag per trigger
    """
    text_lower = (text or "").lower()
    return IdeaTriggers(
        has_idea_verbs=contains_any(text_lower, IDEA_VERBS),
        has_idea_phrases=contains_any(text_lower, IDEA_PHRASES),
        has_future_intent=contains_any(text_lower, FUTURE_INTENT_PHRASES),
    )
