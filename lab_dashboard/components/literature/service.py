"""
Literature Management Service
"""
from lab_dashboard.components import register_entity
from lab_dashboard.components.entity_service import EntityService, as_bool, as_int
from lab_dashboard.core.errors import ValidationError
from lab_dashboard.core.filtering import split_csv, unique_values


@register_entity
class LiteratureService(EntityService):
    """Literature references with tags, rating and saved flag"""

    collection = 'literature'
    item_name = 'Literature Item'
    search_fields = ('title', 'authors', 'tags')
    required_fields = ('title', 'authors', 'journal', 'year')
    text_fields = ('title', 'journal', 'doi')

    def filter(self, records, term='', tag='', year=''):
        return self.search(records, term, equals={'year': year}, contains={'tags': tag})

    def all_tags(self, records):
        return unique_values(records, 'tags')

    def all_years(self, records):
        return unique_values(records, 'year', reverse=True)

    def build_record(self, data):
        authors = split_csv(data.get('authors'))
        if not authors:
            raise ValidationError('Please fill in all required fields', fields=['authors'])

        rating = as_int(data.get('rating'), 'rating', default=0)
        if not 0 <= rating <= 5:
            raise ValidationError('rating must be between 0 and 5', fields=['rating'])

        return {
            'title': data['title'].strip(),
            'authors': authors,
            'journal': data['journal'].strip(),
            'year': as_int(data.get('year'), 'year'),
            'doi': (data.get('doi') or '').strip() or None,
            'tags': split_csv(data.get('tags')),
            'rating': rating,
            'notes': as_bool(data.get('notes')),
            'saved': False,
        }

    @staticmethod
    def author_line(authors, limit=3):
        """First few authors, with 'et al.' when truncated"""
        line = ', '.join(authors[:limit])
        if len(authors) > limit:
            line += ', et al.'
        return line
