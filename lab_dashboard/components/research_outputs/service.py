"""
Research Output Service
Papers, code releases and patents produced by the group
"""
from collections import Counter

from lab_dashboard.components import register_entity
from lab_dashboard.components.entity_service import EntityService, as_int
from lab_dashboard.core.errors import ValidationError
from lab_dashboard.core.filtering import split_csv, unique_values

OUTPUT_TYPES = ['paper', 'code', 'patent']

# Chart series name per output type
CHART_SERIES = {'paper': 'papers', 'patent': 'patents', 'code': 'codes'}


@register_entity
class ResearchOutputsService(EntityService):
    """Research outputs with per-type summary and per-year chart data"""

    collection = 'research_outputs'
    item_name = 'Research Output'
    search_fields = ('title', 'authors', 'tags')
    required_fields = ('title', 'type', 'authors', 'year')
    text_fields = ('title', 'type', 'venue', 'link')

    def filter(self, records, term='', output_type='all', year=''):
        return self.search(records, term, equals={'type': output_type, 'year': year})

    def years(self, records):
        return [str(y) for y in unique_values(records, 'year', reverse=True)]

    def summary(self, records):
        """Number of outputs per type"""
        counts = Counter(r.get('type') for r in records)
        return {output_type: counts.get(output_type, 0) for output_type in OUTPUT_TYPES}

    def publications_by_year(self, records):
        """Chart rows of {year, papers, patents, codes}, oldest year first"""
        by_year = {}
        for record in records:
            series = CHART_SERIES.get(record.get('type'))
            if series is None or record.get('year') is None:
                continue
            row = by_year.setdefault(str(record['year']), {'papers': 0, 'patents': 0, 'codes': 0})
            row[series] += 1
        return [{'year': year, **by_year[year]} for year in sorted(by_year)]

    def build_record(self, data):
        output_type = data['type']
        if output_type not in OUTPUT_TYPES:
            raise ValidationError(f'Unknown output type: {output_type}', fields=['type'])

        authors = split_csv(data.get('authors'))
        if not authors:
            raise ValidationError('Please fill in all required fields', fields=['authors'])

        return {
            'title': data['title'].strip(),
            'type': output_type,
            'authors': authors,
            'year': as_int(data.get('year'), 'year'),
            'venue': (data.get('venue') or '').strip() or None,
            'link': (data.get('link') or '').strip() or None,
            'citations': as_int(data.get('citations'), 'citations', default=0),
            'tags': split_csv(data.get('tags')),
            'saved': False,
        }
