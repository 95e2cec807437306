"""Application Use Cases"""
from .calculate_sizing_use_case import CalculateSizingUseCase
from .list_regions_use_case import ListRegionsUseCase
from .export_report_use_case import ExportReportUseCase

__all__ = [
    'CalculateSizingUseCase',
    'ListRegionsUseCase',
    'ExportReportUseCase'
]
