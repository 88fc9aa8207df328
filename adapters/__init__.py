"""
Adapters — thin Google API wrappers.

Each takes per-invocation credentials, builds its service via
adapters.services and returns the raw API payload.
"""
