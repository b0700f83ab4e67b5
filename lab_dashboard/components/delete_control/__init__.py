"""
Delete Control Component
"""
from .routes import delete_control_bp, init_delete_control
from .service import DeleteControlService

__all__ = ['delete_control_bp', 'init_delete_control', 'DeleteControlService']
