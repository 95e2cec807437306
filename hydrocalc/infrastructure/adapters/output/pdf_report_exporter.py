"""
Output Adapter: Exportador de relatório técnico em PDF (ReportLab)
Layout A4 em milímetros, coordenadas a partir do topo da página
"""
import os
from datetime import datetime
from io import BytesIO
from typing import Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from application.dtos.responses import SizingResponse
from application.ports.output.report_exporter_port import IReportExporter
from domain.constants import App, Report
from domain.exceptions import ReportExportException
from shared.config.logger_config import get_logger
from shared.utils.number_formatter import BrazilianFormatter

logger = get_logger(child=True)

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


class PdfReportExporter(IReportExporter):
    """Renderiza o relatório de dimensionamento com reportlab.pdfgen"""

    MARGIN_LEFT = 20  # mm
    CONTENT_WIDTH = 170  # mm

    def __init__(self, app_name: str = App.NAME):
        self.app_name = app_name
        self._page_width, self._page_height = A4

    def render(self, report: SizingResponse, generated_at: datetime) -> bytes:
        buffer = BytesIO()
        try:
            c = canvas.Canvas(buffer, pagesize=A4)
            c.setTitle(Report.TITLE)
            c.setAuthor(self.app_name)

            self._draw_header(c)
            self._draw_parameters(c, report)
            self._draw_results(c, report)
            self._draw_recommendation(c)
            self._draw_footer(c, generated_at)

            c.showPage()
            c.save()
            return buffer.getvalue()
        except Exception as e:
            logger.error("PDF rendering failed", error=str(e), exc_info=True)
            raise ReportExportException(
                "Could not render report",
                details={"region_id": report.region_id, "error": str(e)}
            ) from e
        finally:
            buffer.close()

    def save(self, report: SizingResponse, generated_at: datetime, path: str) -> str:
        content = self.render(report, generated_at)
        try:
            with open(path, 'wb') as f:
                f.write(content)
        except OSError as e:
            logger.error("PDF write failed", path=path, error=str(e))
            raise ReportExportException(
                "Could not write report file",
                details={"path": path, "error": str(e)}
            ) from e
        return os.path.abspath(path)

    # =============================
    # Helpers de desenho
    # =============================

    def _y(self, top_mm: float) -> float:
        """Converte distância do topo (mm) para coordenada reportlab (pontos)"""
        return self._page_height - top_mm * mm

    @staticmethod
    def _set_color(c: canvas.Canvas, rgb: Tuple[int, int, int]):
        r, g, b = rgb
        c.setFillColorRGB(r / 255, g / 255, b / 255)

    def _text(self, c: canvas.Canvas, x_mm: float, top_mm: float, text: str,
              size: float = 11, font: str = FONT_REGULAR):
        c.setFont(font, size)
        c.drawString(x_mm * mm, self._y(top_mm), text)

    def _draw_header(self, c: canvas.Canvas):
        self._set_color(c, Report.COLOR_PRIMARY)
        self._text(c, self.MARGIN_LEFT, 20, Report.TITLE, size=20, font=FONT_BOLD)

        self._set_color(c, Report.COLOR_SUBTITLE)
        self._text(c, self.MARGIN_LEFT, 30, Report.SUBTITLE, size=12)

        c.setStrokeColorRGB(0, 0, 0)
        c.line(self.MARGIN_LEFT * mm, self._y(35),
               (self.MARGIN_LEFT + self.CONTENT_WIDTH) * mm, self._y(35))

    def _draw_parameters(self, c: canvas.Canvas, report: SizingResponse):
        c.setFillColorRGB(0, 0, 0)
        self._text(c, self.MARGIN_LEFT, 50, Report.SECTION_PARAMETERS, size=14, font=FONT_BOLD)

        lines = [
            f"Localização: {report.region_name}",
            f"Área de Captação: {report.catchment_area_m2} m²",
            f"Demanda Diária: {report.daily_demand_liters} Litros",
            f"Precipitação Média Anual: {report.annual_rainfall_mm} mm",
        ]
        top = 60
        for line in lines:
            self._text(c, self.MARGIN_LEFT + 5, top, line)
            top += 8

    def _draw_results(self, c: canvas.Canvas, report: SizingResponse):
        c.setFillColorRGB(0, 0, 0)
        self._text(c, self.MARGIN_LEFT, 100, Report.SECTION_RESULTS, size=14, font=FONT_BOLD)

        # Caixa de destaque: topo em 105 mm, 40 mm de altura
        self._set_color(c, Report.COLOR_HIGHLIGHT_BOX)
        c.rect(self.MARGIN_LEFT * mm, self._y(145), self.CONTENT_WIDTH * mm, 40 * mm,
               stroke=0, fill=1)

        self._set_color(c, Report.COLOR_PRIMARY)
        self._text(c, 30, 120, f"Volume do Tanque Recomendado: {report.tank_volume}", size=12)

        self._set_color(c, Report.COLOR_SAVINGS)
        self._text(c, 30, 135, f"Economia Estimada Mensal: {report.monthly_savings}", size=12)

        c.setFillColorRGB(0, 0, 0)
        self._text(c, 30, 150, f"Potencial de Captação: {report.monthly_capture}")
        self._text(c, 30, 157, f"Demanda Mensal: {report.monthly_demand}")
        self._text(c, 30, 164, f"Autonomia: {report.autonomy}")

    def _draw_recommendation(self, c: canvas.Canvas):
        c.setFillColorRGB(0, 0, 0)
        self._text(c, self.MARGIN_LEFT, 178, Report.SECTION_RECOMMENDATION, size=14, font=FONT_BOLD)

        size = 10
        lines = simpleSplit(Report.RECOMMENDATION_TEXT, FONT_REGULAR, size, self.CONTENT_WIDTH * mm)
        top = 188
        for line in lines:
            self._text(c, self.MARGIN_LEFT, top, line, size=size)
            top += 5

    def _draw_footer(self, c: canvas.Canvas, generated_at: datetime):
        self._set_color(c, Report.COLOR_FOOTER)
        footer = Report.FOOTER.format(
            date=BrazilianFormatter.format_date(generated_at),
            app_name=self.app_name
        )
        self._text(c, self.MARGIN_LEFT, 280, footer, size=8)
