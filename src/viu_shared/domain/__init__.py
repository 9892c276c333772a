"""Domain layer: enums, document rules, permissions and static tables.

This layer depends only on the stdlib.
It must never import from validation, schemas, output, commands, or config.
"""
