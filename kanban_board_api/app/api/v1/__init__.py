"""Version 1 of the board API."""
