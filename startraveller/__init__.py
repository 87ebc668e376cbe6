"""A turn-based space trading game on a hex sector map, with an administrative console."""

__version__ = "0.1.0"