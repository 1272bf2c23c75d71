"""Shopcart: product records over MongoDB with Beanie."""

__version__ = "0.1.0"
__author__ = "Shopcart Team"

__all__ = ["__version__", "__author__"]
