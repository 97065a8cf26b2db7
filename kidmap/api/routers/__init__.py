"""API routers for the kid-friendly places map."""

from . import locations

__all__ = ["locations"]
