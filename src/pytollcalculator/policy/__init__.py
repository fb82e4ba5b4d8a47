"""Bundled toll policies."""
