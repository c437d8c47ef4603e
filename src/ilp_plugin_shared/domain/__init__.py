"""Domain layer — field rules and the direction variant.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, plugins, or config.
"""
