"""Presentation helpers: unit-scaled formatting and text reports."""
