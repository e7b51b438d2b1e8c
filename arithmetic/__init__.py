"""
Integer arithmetic helpers.
"""

from .euclid import gcd

__all__ = ["gcd"]
