"""
Literature Management Component
"""
from .routes import literature_bp, init_literature
from .service import LiteratureService

__all__ = ['literature_bp', 'init_literature', 'LiteratureService']
