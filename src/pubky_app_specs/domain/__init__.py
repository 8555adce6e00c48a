"""Domain layer: identifiers, object models, paths and URIs.

This layer depends only on stdlib, pydantic, blake3 and the config models.
It must never import from services, commands, or output.
"""
