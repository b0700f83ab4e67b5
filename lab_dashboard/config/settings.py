"""
Dashboard configuration settings
"""
import os
from datetime import timedelta


class DashboardConfig:
    """Centralized configuration for dashboard"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=8)
    MAX_CONTENT_LENGTH = 4 * 1024 * 1024  # avatars are stored inline

    # Rate limiting
    RATELIMIT_ENABLED = os.environ.get('RATELIMIT_ENABLED', 'true').lower() == 'true'
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"

    # Remote data store (PostgREST / Supabase REST interface)
    SUPABASE_URL = os.environ.get('SUPABASE_URL', '')
    SUPABASE_KEY = os.environ.get('SUPABASE_KEY', '')
    REMOTE_TIMEOUT = float(os.environ.get('REMOTE_TIMEOUT', '10'))

    # Collections with a backing table; everything else lives in local storage
    REMOTE_TABLES = ('reports', 'literature', 'research_outputs', 'tools', 'guidelines', 'profiles')

    # Local storage fallback
    LOCAL_STORAGE_DIR = os.environ.get(
        'LAB_DASHBOARD_DATA_DIR',
        os.path.join(os.path.expanduser('~'), '.lab_dashboard')
    )
    PROFILE_KEY = 'userProfile'
    NOTIFICATION_PREFERENCES_KEY = 'notificationPreferences'

    DEFAULT_PROFILE = {
        'name': 'Guest User',
        'email': '',
        'title': 'Researcher',
        'department': 'Research',
        'bio': '',
        'avatar': '/static/placeholder.svg',
        'tags': ['NLP', 'Computer Vision'],
    }

    DEFAULT_NOTIFICATION_PREFERENCES = {
        'email': {
            'research_updates': True,
            'system_announcements': True,
            'new_publications': True,
        },
        'push': {
            'research_updates': False,
            'system_announcements': True,
            'new_publications': False,
        },
    }

    # Navigation shown in the side bar
    NAV_ITEMS = [
        {'title': 'Dashboard', 'endpoint': 'overview.dashboard'},
        {'title': 'Report Hub', 'endpoint': 'reports.list_page'},
        {'title': 'Literature', 'endpoint': 'literature.list_page'},
        {'title': 'Research Output', 'endpoint': 'research_outputs.list_page'},
        {'title': 'Tool Library', 'endpoint': 'tools.list_page'},
        {'title': 'Guidelines', 'endpoint': 'guidelines.list_page'},
        {'title': 'News', 'endpoint': 'news.list_page'},
    ]

    # UI settings
    MAX_LOG_ENTRIES = 1000
    ACTIVITY_CALENDAR_DAYS = 60
    DASHBOARD_RECENT_NEWS = 3

