"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de repositórios e exportadores
"""

from infrastructure.adapters.output.regions_repository import RegionsRepository, get_repository
from infrastructure.adapters.output.pdf_report_exporter import PdfReportExporter

__all__ = [
    'RegionsRepository',
    'get_repository',
    'PdfReportExporter'
]
