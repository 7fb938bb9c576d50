"""
Data models for voice diary entries.

These models represent the input records handed to the entry classifier.
Coercion of raw tabular values happens here so the classifier only ever
sees well-formed entries.
"""

import json
import logging
import math
import uuid
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

TAG_SEPARATOR = ";"
DEFAULT_USER_ID = "default-user"


def generate_entry_id() -> str:
    """Generate a short random identifier for entries that lack one."""
    return uuid.uuid4().hex[:11]


class VoiceEntry(BaseModel):
    """
    A single transcribed voice note.

    Only `transcript_user`, `tags_user` and `emotion_score_score` are read
    by the classifier. Unknown source columns are kept as extra fields.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(
        default_factory=generate_entry_id,
        description="Entry identifier, generated when absent",
    )
    user_id: str = Field(
        default=DEFAULT_USER_ID,
        description="Owner of the entry",
    )
    transcript_user: str = Field(
        default="",
        description="User-facing transcript text",
    )
    tags_user: list[str] = Field(
        default_factory=list,
        description="Tags applied by the user, in order, duplicates allowed",
    )
    tags_model: list[str] = Field(
        default_factory=list,
        description="Tags suggested by a model",
    )
    emotion_score_score: Optional[float] = Field(
        default=None,
        description="Signed emotion score, None when unknown",
    )
    embedding: Optional[list[float]] = Field(
        default=None,
        description="Optional embedding vector",
    )

    @field_validator("id", mode="before")
    @classmethod
    def default_blank_id(cls, v: Any) -> Any:
        """Generate an identifier for blank values."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return generate_entry_id()
        return v

    @field_validator("user_id", mode="before")
    @classmethod
    def default_blank_user(cls, v: Any) -> Any:
        """Fall back to the default user for blank values."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_USER_ID
        return v

    @field_validator("transcript_user", mode="before")
    @classmethod
    def default_blank_transcript(cls, v: Any) -> Any:
        """Treat a missing transcript as empty text."""
        return "" if v is None else v

    @field_validator("tags_user", "tags_model", mode="before")
    @classmethod
    def split_tags(cls, v: Any) -> Any:
        """Split a separated tag cell into a list of tags."""
        if v is None:
            return []
        if isinstance(v, str):
            return [tag.strip() for tag in v.split(TAG_SEPARATOR) if tag.strip()]
        return v

    @field_validator("emotion_score_score", mode="before")
    @classmethod
    def parse_emotion_score(cls, v: Any) -> Optional[float]:
        """Parse the emotion score, degrading to None when unusable."""
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, (int, float)):
            score = float(v)
        else:
            try:
                score = float(str(v).strip())
            except ValueError:
                return None
        return None if math.isnan(score) else score

    @field_validator("embedding", mode="before")
    @classmethod
    def parse_embedding(cls, v: Any) -> Any:
        """Decode a JSON-encoded embedding, degrading to None when invalid."""
        if v is None:
            return None
        if isinstance(v, str):
            if not v.strip():
                return None
            try:
                v = json.loads(v)
            except json.JSONDecodeError as e:
                logger.warning(
                    "Failed to parse embedding JSON for entry. Using None instead. Error: %s",
                    e,
                )
                return None
        if not isinstance(v, list) or not all(
            isinstance(x, (int, float)) and not isinstance(x, bool) for x in v
        ):
            logger.warning("Embedding is not a list of numbers. Using None instead.")
            return None
        return v

    @property
    def has_emotion_score(self) -> bool:
        """Check whether an emotion score is available."""
        return self.emotion_score_score is not None
