"""Loaders that turn exported records into voice entries."""

from voice_ideas.loaders.csv_loader import load_voice_entries, parse_voice_entries

__all__ = ["load_voice_entries", "parse_voice_entries"]
