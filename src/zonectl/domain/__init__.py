"""Domain layer — entities, errors, path rules, and repository ports.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
