"""Math utilities."""

from qbrating.utils.math import clamp

__all__ = ["clamp"]
