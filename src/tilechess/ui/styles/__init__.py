"""Visual styles."""
