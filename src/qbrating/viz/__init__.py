"""Rating card rendering (matplotlib)."""

from qbrating.viz.rating_card import render_rating_card

__all__ = ["render_rating_card"]
