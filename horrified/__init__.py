"""Board, pieces and hero turns for a two-hero board game against Dracula and the Invisible Man."""

__version__ = "0.1.0"