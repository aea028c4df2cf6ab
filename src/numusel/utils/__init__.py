"""Utility modules shared across the package."""
