"""Side-scrolling runner game played on text-file tile maps, drawn with pygame."""

__version__ = "0.1.0"