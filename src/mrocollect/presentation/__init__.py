"""Presentation layer: user-facing declaration surface."""
