"""HTTP API for the kid-friendly places map."""
