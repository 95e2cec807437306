"""
Output Port: Interface do Repositório de Regiões
Define o contrato que deve ser implementado pela camada de infraestrutura
"""
from abc import ABC, abstractmethod
from typing import List

from domain.entities.region import RegionRainfall


class IRegionRepository(ABC):
    """Interface para repositório de regiões pluviométricas"""

    @abstractmethod
    def get_all(self) -> List[RegionRainfall]:
        """Retorna todas as regiões na ordem de exibição"""
        pass
