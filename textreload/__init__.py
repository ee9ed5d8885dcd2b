"""Text auto-correction: spacing, punctuation, quotes, articles and inline case/number commands."""

__version__ = "0.1.0"
__all__ = ["cleaner", "commands", "cli"]