"""
Report Hub Service
"""
from lab_dashboard.components import register_entity
from lab_dashboard.components.entity_service import EntityService, today_iso
from lab_dashboard.core.errors import ValidationError
from lab_dashboard.core.filtering import split_csv

REPORT_TYPES = ['Individual', 'Internal Group', 'Collaborative']


@register_entity
class ReportsService(EntityService):
    """Weekly/monthly progress reports"""

    collection = 'reports'
    item_name = 'Report'
    search_fields = ('title', 'author', 'keywords')
    required_fields = ('title', 'type')
    text_fields = ('title', 'type', 'author', 'date', 'content')

    def filter(self, records, term='', report_type=''):
        return self.search(records, term, equals={'type': report_type})

    def authored_by(self, records, author):
        return [r for r in records if r.get('author') == author]

    def build_record(self, data):
        report_type = data['type']
        if report_type not in REPORT_TYPES:
            raise ValidationError(f'Unknown report type: {report_type}', fields=['type'])

        return {
            'title': data['title'].strip(),
            'author': (data.get('author') or '').strip() or self.profile()['name'],
            'type': report_type,
            'date': data.get('date') or today_iso(),
            'keywords': split_csv(data.get('keywords')),
            'content': data.get('content') or None,
            'views': 0,
            'comments': 0,
        }
