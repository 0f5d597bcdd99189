"""Domain layer — packet types, parsing, and ordering rules.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
