"""A small vertical space shooter: game objects, the playing field and the game window."""

__version__ = "0.2.0"
__all__ = ["entities", "scene", "game"]