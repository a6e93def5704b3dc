"""Convenience helpers."""
