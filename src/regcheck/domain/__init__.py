"""Domain layer — types, rules, lookups, and models.

This layer depends only on stdlib and pydantic.
It must never import from services, config, output, or commands.
Every function here is pure: no logging, no I/O, no shared state.
"""
