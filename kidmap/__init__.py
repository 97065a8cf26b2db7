"""Kid-friendly places map backed by OpenStreetMap."""

__version__ = "0.1.0"
