"""Data model for game collections."""

from dataclasses import dataclass


@dataclass
class Collection:
    """A named group of games, one per platform."""

    name: str
    """Display name, also used as the collection key."""
