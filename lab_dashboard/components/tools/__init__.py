"""
Tool Library Component
"""
from .routes import tools_bp, init_tools
from .service import ToolsService

__all__ = ['tools_bp', 'init_tools', 'ToolsService']
