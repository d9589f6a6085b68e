"""Domain layer — fragment kinds, selector builders, documents, codec.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
