"""Persistence collaborators of the engine."""
from .store import GameStore, JsonFileStore, MemoryStore, SavedGame

__all__ = ["GameStore", "JsonFileStore", "MemoryStore", "SavedGame"]
