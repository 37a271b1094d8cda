# -*- coding: utf-8 -*-
"""
Marine unit and mortgage lookup repositories
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "MarineUnitRepository",
    "ApiMarineUnitRepository",
    "MortgageRepository",
    "ApiMortgageRepository",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "MarineUnitRepository":
        from .marine_unit_repository import MarineUnitRepository
        return MarineUnitRepository
    elif name == "ApiMarineUnitRepository":
        from .marine_unit_repository import ApiMarineUnitRepository
        return ApiMarineUnitRepository
    elif name == "MortgageRepository":
        from .mortgage_repository import MortgageRepository
        return MortgageRepository
    elif name == "ApiMortgageRepository":
        from .mortgage_repository import ApiMortgageRepository
        return ApiMortgageRepository
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
