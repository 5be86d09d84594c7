"""Configuration, persistence and backups."""
