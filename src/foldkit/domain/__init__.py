"""Domain layer — sequences, the fold primitive, and everything built on it.

This layer depends only on the standard library.
It must never import from services, commands, output, or config.
"""
