"""Utility functions for display text handling."""


def text_or(value, default=""):
    """Return *value* as text, or *default* when it is empty or missing."""
    return str(value) if value else default


def format_points(value):
    """Render a point total without a trailing ``.0`` for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)
