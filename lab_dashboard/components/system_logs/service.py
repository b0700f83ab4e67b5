"""
System Logs Service
Reads the shared activity log
"""
from lab_dashboard.core import get_activity_log


class SystemLogsService:
    """Service for System Logs component"""

    def get_logs(self, level_filter='ALL', limit=50):
        """Get activity entries, optionally filtered by level, most recent last"""
        return get_activity_log().get_logs(level_filter=level_filter, limit=limit)
