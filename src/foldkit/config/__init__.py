"""Configuration — pydantic models, layered settings, and logging setup."""
