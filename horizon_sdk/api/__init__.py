"""
Public API Layer

This layer contains the public-facing API of the Horizon SDK.
All user-facing classes and functions should be exposed through this layer.
"""

from .client import HorizonClient

__all__ = ["HorizonClient"]
