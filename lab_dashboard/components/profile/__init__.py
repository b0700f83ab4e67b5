"""
Profile Component
User profile, avatar upload and settings pages
"""
from .routes import profile_bp, init_profile
from .service import ProfileService

__all__ = ['profile_bp', 'init_profile', 'ProfileService']
