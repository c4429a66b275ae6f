"""Pokedex gateway: species lookups from PokeAPI with optional fun translations."""

__version__ = "0.1.0"
