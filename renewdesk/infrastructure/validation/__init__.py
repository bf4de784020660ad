"""
Input validation for request DTOs.
"""

from .validators import BusinessValidator, DataValidator, SecurityValidator

__all__ = ["BusinessValidator", "DataValidator", "SecurityValidator"]
