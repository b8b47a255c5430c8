"""Shared helpers for orgconfig CLI commands."""
