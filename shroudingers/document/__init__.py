"""Path-addressed access to parsed documents."""

from shroudingers.document.document import ClausewitzDocument

__all__ = ["ClausewitzDocument"]
