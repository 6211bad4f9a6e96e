"""Palettes, controller input, sprites, tilemaps and save data for a tile-based role-playing game on pygame."""

__version__ = "0.1.0"