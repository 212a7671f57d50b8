"""Domain layer: identifier types, checksum rules, and errors.

This layer depends only on stdlib.
It must never import from services, config, output, or commands.
"""
