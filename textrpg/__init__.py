"""A turn-based text role-playing game for the terminal: player, monsters, items, shop and game loop."""

__version__ = "1.0.0"