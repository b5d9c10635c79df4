"""Utilities for CSS Document."""
