"""
Configurações centralizadas da aplicação
"""
import os

from domain.constants import App, Report

# Logging
SERVICE_NAME = os.environ.get('HYDROCALC_SERVICE', 'hydrocalc')

# Relatório PDF
REPORT_OUTPUT_DIR = os.environ.get('REPORT_OUTPUT_DIR', '.')
REPORT_FILENAME = os.environ.get('REPORT_FILENAME', Report.DEFAULT_FILENAME)

# Timezone do carimbo de data do relatório
TIMEZONE = os.environ.get('TIMEZONE', App.TIMEZONE)
