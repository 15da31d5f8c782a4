"""File readers keyed by extension."""
