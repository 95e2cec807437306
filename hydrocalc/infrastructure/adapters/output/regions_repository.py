"""
Output Adapter: Implementação do Repositório de Regiões
Usa a tabela pluviométrica imutável como fonte de dados
"""
from typing import List

from application.ports.output.region_repository_port import IRegionRepository
from domain.entities.region import RegionRainfall
from domain.value_objects.rainfall_table import RainfallTable


class RegionsRepository(IRegionRepository):
    """Repositório de regiões em memória"""

    def __init__(self, rainfall_table: RainfallTable = None):
        """
        Inicializa o repositório

        Args:
            rainfall_table: Tabela injetada. Se None, usa RainfallTable.default().
        """
        if rainfall_table is None:
            rainfall_table = RainfallTable.default()
        self.rainfall_table = rainfall_table

    def get_all(self) -> List[RegionRainfall]:
        """Retorna todas as regiões na ordem de exibição"""
        return self.rainfall_table.all()


# Singleton global - tabela carregada uma vez por processo
_repository_instance = None


def get_repository() -> RegionsRepository:
    """Retorna instância singleton do repositório com a tabela padrão"""
    global _repository_instance

    if _repository_instance is None:
        _repository_instance = RegionsRepository()

    return _repository_instance
