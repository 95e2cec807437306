"""
Input Port: Interface para listar regiões disponíveis
"""
from abc import ABC, abstractmethod
from typing import List

from domain.entities.region import RegionRainfall


class IListRegionsUseCase(ABC):
    """Interface para caso de uso de listagem de regiões"""

    @abstractmethod
    def execute(self) -> List[RegionRainfall]:
        """Retorna as regiões na ordem de exibição"""
        pass
