"""
Domain Services - Serviços de lógica de negócio pura (sem I/O, sem formatação)
"""

from domain.services.sizing_calculator import SizingCalculator

__all__ = ['SizingCalculator']
