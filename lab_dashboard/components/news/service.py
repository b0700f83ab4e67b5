"""
News Service
News items have no remote table and are kept in local storage
"""
import uuid
from datetime import datetime, timezone

from lab_dashboard.components import register_entity
from lab_dashboard.components.entity_service import EntityService, as_bool
from lab_dashboard.core.errors import ValidationError

NEWS_TYPES = ['announcement', 'update', 'event', 'achievement']
NEWS_TABS = ['all', 'unread', 'important', 'saved']


@register_entity
class NewsService(EntityService):
    """Group announcements, updates, events and achievements"""

    collection = 'news'
    item_name = 'News Item'
    search_fields = ('title', 'content', 'author')
    required_fields = ('title', 'content', 'type')
    text_fields = ('title', 'type', 'content')

    def filter(self, records, term='', news_type='', tab='all'):
        result = self.search(records, term, equals={'type': news_type})
        if tab == 'unread':
            result = [n for n in result if not n.get('read')]
        elif tab == 'important':
            result = [n for n in result if n.get('important')]
        elif tab == 'saved':
            result = [n for n in result if n.get('saved')]
        return result

    def build_record(self, data):
        news_type = data['type']
        if news_type not in NEWS_TYPES:
            raise ValidationError(f'Unknown news type: {news_type}', fields=['type'])

        profile = self.profile()
        return {
            'id': str(uuid.uuid4()),
            'title': data['title'].strip(),
            'content': data['content'].strip(),
            'author': profile['name'],
            'author_role': profile.get('title'),
            'author_avatar': profile.get('avatar'),
            'date': datetime.now(timezone.utc).isoformat(),
            'type': news_type,
            'important': as_bool(data.get('important')),
            'read': False,
            'saved': False,
        }

    def mark_read(self, record_id):
        return self.set_flag(record_id, 'read', True)

    @staticmethod
    def initials(name):
        return ''.join(part[0] for part in (name or '').split() if part)
