"""Service layer exports."""

from .damage_service import DamageForecast, DamageService
from .errors import FactoryError

__all__ = [
    "DamageForecast",
    "DamageService",
    "FactoryError",
]
