"""Portable Action Notation (PAN) for abstract strategy board games."""

from pan.core import *  # noqa: F403
from pan.core import __all__ as __all__

__version__ = "1.0.0"
