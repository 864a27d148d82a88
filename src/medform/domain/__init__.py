"""Domain layer: vocabulary, constraints, refinements, and the rule catalog.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config,
and it performs no I/O or logging.
"""
