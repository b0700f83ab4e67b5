"""
Research Output Component
"""
from .routes import research_outputs_bp, init_research_outputs
from .service import ResearchOutputsService

__all__ = ['research_outputs_bp', 'init_research_outputs', 'ResearchOutputsService']
