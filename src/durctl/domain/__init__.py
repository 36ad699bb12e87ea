"""Domain layer: designators, tokens, grammar, normalization.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
