"""Command handlers (writes)."""
