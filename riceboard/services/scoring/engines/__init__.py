# riceboard/services/scoring/engines/__init__.py

from .rice import RiceScoringEngine

__all__ = ["RiceScoringEngine"]
