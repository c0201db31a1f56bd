"""A tile-based puzzle game: collect every coin, then reach the exit.

Includes map checking, XPM image loading and a pygame front end.
"""

__version__ = "0.1.0"