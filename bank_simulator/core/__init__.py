"""Core value helpers."""
