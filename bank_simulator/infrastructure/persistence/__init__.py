"""Storage file persistence."""
