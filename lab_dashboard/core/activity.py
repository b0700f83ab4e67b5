"""
Activity log
Bounded in-memory record of what changed in the dashboard
"""
import logging
from collections import deque
from datetime import datetime

logger = logging.getLogger(__name__)

_LEVELS = {'INFO': logging.INFO, 'WARNING': logging.WARNING, 'ERROR': logging.ERROR}


class ActivityLog:
    """Keeps the most recent activity entries"""

    def __init__(self, maxlen=1000):
        self.entries = deque(maxlen=maxlen)

    def add(self, level, message, collection=None, record_id=None):
        """Add log entry"""
        entry = {
            'timestamp': datetime.now().isoformat(),
            'level': level,
            'message': message,
            'collection': collection,
            'record_id': record_id,
        }
        self.entries.append(entry)
        logger.log(_LEVELS.get(level, logging.INFO), message)
        return entry

    def get_logs(self, level_filter='ALL', limit=50):
        """Get entries filtered by level, most recent last"""
        logs = list(self.entries)

        if level_filter != 'ALL':
            logs = [log for log in logs if log.get('level') == level_filter]

        if limit is not None:
            logs = logs[-limit:] if limit > 0 else []

        return logs

    def __len__(self):
        return len(self.entries)
