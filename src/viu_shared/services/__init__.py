"""Service layer: CLI-facing operations returning ServiceResult.

Services may import from domain, validation, schemas and config.
They must never import from commands or output.renderers.
"""
