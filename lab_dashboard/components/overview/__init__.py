"""
Dashboard Overview Component
Displays per-collection counts and the latest news
"""

from .routes import overview_bp, init_overview
from .service import OverviewService

__all__ = ['overview_bp', 'init_overview', 'OverviewService']
