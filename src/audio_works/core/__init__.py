"""Core models and errors for audio works."""

from .errors import LibraryReadError
from .models import Track

__all__ = ["LibraryReadError", "Track"]
