"""Domain layer: the project-name policy and its building blocks.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
