"""Application DTOs - Data Transfer Objects para contratos de entrada e saída"""

from application.dtos.requests import (
    CalculateSizingRequest,
    ExportReportRequest
)
from application.dtos.responses import (
    RegionOptionResponse,
    SizingResponse
)

__all__ = [
    'CalculateSizingRequest',
    'ExportReportRequest',
    'RegionOptionResponse',
    'SizingResponse'
]
