"""
PRESENTATION LAYER - FastAPI routers and request dependencies.

Thin layer: parses HTTP input, builds commands/queries, calls handlers and
maps domain errors to status codes per route.
"""
