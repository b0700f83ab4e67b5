"""
Dashboard page routes
"""
from .main_routes import main_bp, page_not_found

__all__ = ['main_bp', 'page_not_found']
