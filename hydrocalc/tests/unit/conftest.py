"""
Configurações e fixtures compartilhadas para testes unitários
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from application.dtos.requests import CalculateSizingRequest
from domain.services.sizing_calculator import SizingCalculator
from domain.value_objects.rainfall_table import RainfallTable


@pytest.fixture
def rainfall_table():
    """Tabela padrão (SP 1600, RJ 1200, BH/Curitiba/Brasília 1500)"""
    return RainfallTable.default()


@pytest.fixture
def calculator(rainfall_table):
    return SizingCalculator(rainfall_table)


@pytest.fixture
def make_request():
    """
    Factory fixture para criar CalculateSizingRequest com valores padrão

    Usage:
        def test_something(make_request):
            request = make_request(catchment_area_m2="100,5")
    """
    def _make(
        region_id: str = "SP",
        catchment_area_m2=100,
        daily_demand_liters=300
    ) -> CalculateSizingRequest:
        return CalculateSizingRequest(
            region_id=region_id,
            catchment_area_m2=catchment_area_m2,
            daily_demand_liters=daily_demand_liters
        )

    return _make
