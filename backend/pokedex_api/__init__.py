"""Pokédex API Package — REST service for Pokémon records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
