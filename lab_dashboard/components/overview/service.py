"""
Dashboard Overview Service
"""
import logging

from lab_dashboard.components import registry
from lab_dashboard.core import get_activity_log, get_repository
from lab_dashboard.core.errors import RemoteStoreError

logger = logging.getLogger(__name__)


class OverviewService:
    """Per-collection counts and recent activity for the dashboard page"""

    def get_collection_stats(self):
        """Record count per registered collection; None when the store is unreachable"""
        repository = get_repository()
        stats = {}

        for name, component in registry.items():
            try:
                count = len(component.list_all())
                status = 'ok'
            except RemoteStoreError as e:
                logger.error(f"Overview count for {name} failed: {e}")
                count = None
                status = 'unavailable'

            stats[name] = {
                'name': component.item_name,
                'count': count,
                'status': status,
                'backing': 'remote' if repository.is_remote(name) else 'local',
            }

        return stats

    def get_overview(self, recent_news=3):
        from lab_dashboard.components.news import NewsService

        stats = self.get_collection_stats()
        total_items = sum(s['count'] for s in stats.values() if s['count'] is not None)

        return {
            'collections': stats,
            'total_items': total_items,
            'unavailable_collections': sum(1 for s in stats.values() if s['status'] != 'ok'),
            'recent_news': NewsService().list_all()[:recent_news],
            'activity_count': len(get_activity_log()),
        }
