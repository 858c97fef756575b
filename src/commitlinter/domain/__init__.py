"""Domain layer — message grammar, failure kinds, and verification rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or output.
"""
