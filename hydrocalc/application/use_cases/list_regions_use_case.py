"""
Use Case: List Regions
"""
from typing import List

from application.ports.input.list_regions_port import IListRegionsUseCase
from application.ports.output.region_repository_port import IRegionRepository
from domain.entities.region import RegionRainfall


class ListRegionsUseCase(IListRegionsUseCase):
    """Use case: regiões disponíveis para o seletor"""

    def __init__(self, region_repository: IRegionRepository):
        self.region_repository = region_repository

    def execute(self) -> List[RegionRainfall]:
        return self.region_repository.get_all()
