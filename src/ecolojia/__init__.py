"""Ecolojia scoring service.

Ingredient-based risk/benefit scoring for cosmetics and detergents.
"""

__version__ = "0.1.0"
