"""Shared configuration"""
from .settings import SERVICE_NAME, REPORT_OUTPUT_DIR, REPORT_FILENAME, TIMEZONE
from .logger_config import get_logger, logger

__all__ = ['SERVICE_NAME', 'REPORT_OUTPUT_DIR', 'REPORT_FILENAME', 'TIMEZONE', 'get_logger', 'logger']
