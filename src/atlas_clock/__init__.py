"""Atlas Clock - a terminal dashboard of world clocks."""

__version__ = "1.0.0"
