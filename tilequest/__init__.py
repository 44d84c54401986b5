"""Tile maps, tiles, scene links, sprite frames, text and HUD layout, and a tile palette editor for a tile-based role-playing game."""

__version__ = "0.1.0"