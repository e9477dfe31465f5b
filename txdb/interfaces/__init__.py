"""
Abstract base classes for the storage layers.
"""

from txdb.interfaces.layer import Layer

__all__ = ["Layer"]
