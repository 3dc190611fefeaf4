"""Terminal image gallery rendered as coloured cells."""

__version__ = "0.1.0"
