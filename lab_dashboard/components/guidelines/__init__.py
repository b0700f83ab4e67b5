"""
Guidelines Component
"""
from .routes import guidelines_bp, init_guidelines
from .service import GuidelinesService

__all__ = ['guidelines_bp', 'init_guidelines', 'GuidelinesService']
