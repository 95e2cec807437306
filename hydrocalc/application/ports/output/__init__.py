"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .region_repository_port import IRegionRepository
from .report_exporter_port import IReportExporter
