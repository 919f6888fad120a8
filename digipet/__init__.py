"""A virtual pet simulation: evolving monsters, an event ring, BMP loading and sprite composition."""

__version__ = "0.1.0"
__all__ = ["bitmap", "entity", "events", "game", "monster", "monsterdefs", "sprite"]