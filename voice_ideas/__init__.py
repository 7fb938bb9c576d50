"""
Voice Ideas

Classifies transcribed voice-diary entries into tag frequencies and a
list of detected ideas annotated with heuristic attributes.
"""

__version__ = "0.1.0"

from voice_ideas.entry_processor import process_entries
from voice_ideas.loaders.csv_loader import load_voice_entries, parse_voice_entries
from voice_ideas.models.entry import VoiceEntry
from voice_ideas.models.idea import IdeaRecord, ProcessedResult

__all__ = [
    "process_entries",
    "load_voice_entries",
    "parse_voice_entries",
    "VoiceEntry",
    "IdeaRecord",
    "ProcessedResult",
]
