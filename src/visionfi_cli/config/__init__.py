"""Configuration loading and persistence."""
