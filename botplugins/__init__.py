"""Chat bot configuration command and a collection of chat plugins."""

__version__ = "1.5.0"