"""Turn-based dungeon combat in the terminal: a hero party against a dragon."""

__version__ = "0.1.0"
__all__ = ["__version__"]