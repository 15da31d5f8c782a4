"""File writers keyed by extension."""
