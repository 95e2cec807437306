"""
Value Object para a tabela pluviométrica
Mapeamento imutável região → precipitação média anual, injetado no calculador
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from domain.constants import Rainfall
from domain.entities.region import RegionRainfall
from domain.exceptions import RegionNotFoundException


@dataclass(frozen=True)
class RainfallTable:
    """
    Value Object para a tabela de precipitação por região

    Características:
    - Imutável (frozen=True + MappingProxyType)
    - Preserva a ordem de inserção (ordem de exibição)
    - Lookup com exceção de domínio para chaves desconhecidas
    """
    regions: Mapping[str, RegionRainfall] = field(default_factory=dict)

    def __post_init__(self):
        """Congela o mapeamento e valida as entradas"""
        frozen = MappingProxyType(dict(self.regions))
        for key, region in frozen.items():
            if key != region.id:
                raise ValueError(
                    f"Chave de região inconsistente: {key!r} != {region.id!r}"
                )
            if region.annual_rainfall_mm <= 0:
                raise ValueError(
                    f"Precipitação inválida para {region.name}: {region.annual_rainfall_mm} mm"
                )
        object.__setattr__(self, 'regions', frozen)

    def get(self, region_id: str) -> RegionRainfall:
        """
        Busca região pela chave

        Args:
            region_id: Chave da região (ex: "SP")

        Returns:
            RegionRainfall correspondente

        Raises:
            RegionNotFoundException: Se a chave não existe na tabela
        """
        region = self.regions.get(region_id) if isinstance(region_id, str) else None
        if region is None:
            raise RegionNotFoundException(
                "Region not found",
                details={"region_id": region_id, "available": list(self.regions)}
            )
        return region

    def all(self) -> List[RegionRainfall]:
        """Retorna todas as regiões na ordem de exibição"""
        return list(self.regions.values())

    def __contains__(self, region_id: object) -> bool:
        return region_id in self.regions

    def __iter__(self) -> Iterator[str]:
        return iter(self.regions)

    def __len__(self) -> int:
        return len(self.regions)

    @classmethod
    def from_tuples(cls, data: Dict[str, Tuple[str, float]]) -> 'RainfallTable':
        """
        Factory method para criar a partir de {chave: (nome, mm)}

        Args:
            data: Dicionário no formato de Rainfall.REGIONS

        Returns:
            Instância de RainfallTable
        """
        return cls(regions={
            key: RegionRainfall(id=key, name=name, annual_rainfall_mm=annual)
            for key, (name, annual) in data.items()
        })

    @classmethod
    def default(cls) -> 'RainfallTable':
        """Tabela padrão (normais INMET aproximadas)"""
        return cls.from_tuples(Rainfall.REGIONS)
