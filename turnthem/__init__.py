"""A pygame arcade game with draggable weapon cards, cannons and shells."""

__version__ = "1.0.0"