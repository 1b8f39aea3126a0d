"""A naval battle board game with animated missiles, explosions and splashes."""

__version__ = "0.1.0"