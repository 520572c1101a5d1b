"""Game state and rules for a campus monster-collecting role-playing game: key events, monsters, backpack, storage box, healing center and sprite collision tests."""

__version__ = "0.1.0"