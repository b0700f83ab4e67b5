"""
Report Hub Component
Individual, group and collaborative progress reports
"""
from .routes import reports_bp, init_reports
from .service import ReportsService

__all__ = ['reports_bp', 'init_reports', 'ReportsService']
