"""
Guidelines Service
Guideline documents come from the remote table and from locally stored
documents; both sources are merged and de-duplicated by id.
"""
import logging
import re
from datetime import datetime, timezone

from lab_dashboard.components import register_entity
from lab_dashboard.components.entity_service import EntityService, as_bool
from lab_dashboard.core import get_repository
from lab_dashboard.core.errors import RemoteStoreError

logger = logging.getLogger(__name__)

GUIDELINE_CATEGORIES = ['research', 'publication', 'ethics', 'data', 'collaboration']


def guideline_file_name(title):
    return re.sub(r'\s+', '_', title.lower()) + '.pdf'


@register_entity
class GuidelinesService(EntityService):
    """Lab guideline documents grouped by category"""

    collection = 'guidelines'
    item_name = 'Guideline'
    search_fields = ('title', 'description', 'category')
    required_fields = ('title', 'category', 'content')
    text_fields = ('title', 'category', 'content', 'version')

    @staticmethod
    def format_guideline(row):
        content = row.get('content') or row.get('description') or ''
        title = row.get('title') or ''
        return {
            'id': row.get('id'),
            'title': title,
            'category': row.get('category') or '',
            'version': row.get('version') or '1.0',
            'last_updated': row.get('updated_at') or row.get('last_updated') or row.get('created_at'),
            'description': content,
            'content': content,
            'is_mandatory': bool(row.get('is_mandatory')),
            'file_name': row.get('file_name') or guideline_file_name(title),
        }

    def list_all(self):
        """Remote guidelines first, then local ones; a later duplicate id replaces an earlier one"""
        repository = get_repository()

        remote_rows = []
        if repository.is_remote(self.collection):
            try:
                remote_rows = repository.list(self.collection)
            except RemoteStoreError as e:
                # Keep going with the local documents only
                logger.error(f"Remote guidelines fetch failed: {e}")

        merged = remote_rows + repository.list_local(self.collection)

        unique = {}
        for row in merged:
            guideline = self.format_guideline(row)
            unique[str(guideline['id'])] = guideline
        return list(unique.values())

    def filter(self, records, term=''):
        return self.search(records, term)

    @staticmethod
    def group_by_category(guidelines):
        grouped = {}
        for guideline in guidelines:
            grouped.setdefault(guideline['category'], []).append(guideline)
        return grouped

    def build_record(self, data):
        return {
            'title': data['title'].strip(),
            'category': data['category'].strip(),
            'content': data['content'].strip(),
            'version': (data.get('version') or '').strip() or None,
            'is_mandatory': as_bool(data.get('is_mandatory')),
            'updated_at': datetime.now(timezone.utc).isoformat(),
        }

    def delete(self, record_id):
        """Remove the guideline from the remote table and any local copy"""
        repository = get_repository()
        repository.delete(self.collection, record_id)
        if repository.is_remote(self.collection):
            repository.delete_local(self.collection, record_id)
