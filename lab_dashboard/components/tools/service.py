"""
Tool Library Service
"""
from datetime import datetime, timezone

from lab_dashboard.components import register_entity
from lab_dashboard.components.entity_service import EntityService, as_bool
from lab_dashboard.core.filtering import split_csv, unique_values


@register_entity
class ToolsService(EntityService):
    """Shared lab tools with type filter"""

    collection = 'tools'
    item_name = 'Tool'
    search_fields = ('name', 'description', 'tags')
    required_fields = ('name', 'type', 'description')
    text_fields = ('name', 'type', 'description')

    def list_all(self):
        return [self.format_tool(row) for row in super().list_all()]

    @staticmethod
    def format_tool(row):
        """Fill display defaults missing from stored rows"""
        tool = dict(row)
        tool['tags'] = tool.get('tags') or []
        tool['last_updated'] = tool.get('last_updated') or datetime.now(timezone.utc).isoformat()
        tool['stars'] = tool.get('stars') or 0
        tool['views'] = tool.get('views') or 0
        tool['has_documentation'] = bool(tool.get('has_documentation'))
        return tool

    def filter(self, records, term='', tool_type=''):
        return self.search(records, term, equals={'type': tool_type})

    def tool_types(self, records):
        return unique_values(records, 'type')

    def build_record(self, data):
        return {
            'name': data['name'].strip(),
            'description': data['description'].strip(),
            'type': data['type'].strip(),
            'tags': split_csv(data.get('tags')),
            'author': self.profile()['name'],
            'has_documentation': as_bool(data.get('has_documentation')),
        }
