"""A 2D archery game with a bow, a target and a moving barrier, drawn with pygame."""

__version__ = "0.1.0"