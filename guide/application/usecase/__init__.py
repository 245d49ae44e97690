"""Use cases, one per external operation."""
