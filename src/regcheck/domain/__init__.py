"""Domain layer: the validation predicates.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""
