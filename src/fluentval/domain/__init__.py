"""Domain layer — rule models, result types, and input classification.

This layer depends only on stdlib and pydantic.
It must never import from validators, config, output, or commands.
"""
