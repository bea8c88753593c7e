"""Domain layer — shapes, JSON codec, and the CSS selector builder.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
