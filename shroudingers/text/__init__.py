"""Source text positions."""

from shroudingers.text.position import TextPosition

__all__ = ["TextPosition"]
