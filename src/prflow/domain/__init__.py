"""Domain layer — branch naming, repository URLs, step descriptors.

This layer depends only on stdlib, pydantic, and prflow.errors.
It must never import from services, infrastructure, commands, or config.
"""
