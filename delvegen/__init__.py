"""Procedural dungeon map generation for roguelike games: map builders, chains and helpers."""

__version__ = "0.1.0"