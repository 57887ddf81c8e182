"""FastAPI dependency injection helpers."""

from src.domain.calculator import DistanceCalculator

# Stateless, so a single instance is shared across requests
_calculator = DistanceCalculator()


def get_calculator() -> DistanceCalculator:
    """Return the shared distance calculator."""
    return _calculator
