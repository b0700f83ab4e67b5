"""
Base service for entity components
Each entity page lists, filters, creates and deletes records of one collection
"""
from datetime import date

from lab_dashboard.core import get_profile_context, get_repository
from lab_dashboard.core.errors import ValidationError
from lab_dashboard.core.filtering import filter_records, missing_fields

TRUE_VALUES = (True, 'on', 'true', 'True', '1', 'yes', 1)


def as_bool(value):
    return value in TRUE_VALUES


def as_int(value, field, default=None):
    """Parse an integer form value, raising ValidationError on bad input"""
    if value is None or (isinstance(value, str) and not value.strip()):
        if default is None:
            raise ValidationError(f'{field} is required', fields=[field])
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{field} must be a whole number', fields=[field])


def today_iso():
    return date.today().isoformat()


class EntityService:
    """Shared list/create/delete behaviour; subclasses describe the entity"""

    collection = None
    item_name = 'Item'
    search_fields = ()
    required_fields = ()
    # Fields that are stripped as strings when building a record
    text_fields = ()

    def list_all(self):
        return get_repository().list(self.collection)

    def search(self, records, term='', equals=None, contains=None):
        return filter_records(records, term, self.search_fields, equals=equals, contains=contains)

    def profile(self):
        return get_profile_context().get()

    def validate(self, data):
        if not isinstance(data, dict):
            raise ValidationError('Expected a JSON object')
        missing = missing_fields(data, self.required_fields)
        if missing:
            raise ValidationError('Please fill in all required fields', fields=missing)
        not_text = [f for f in self.text_fields if data.get(f) is not None and not isinstance(data[f], str)]
        if not_text:
            raise ValidationError('These fields must be text', fields=not_text)

    def build_record(self, data):
        raise NotImplementedError

    def create(self, data):
        """Validate form data, shape it into a record and insert it"""
        self.validate(data)
        record = self.build_record(data)
        return get_repository().insert(self.collection, record)

    def delete(self, record_id):
        get_repository().delete(self.collection, record_id)

    def toggle_flag(self, record_id, field):
        """Flip a boolean field in place, returning the updated record"""
        repository = get_repository()
        record = repository.get(self.collection, record_id)
        if record is None:
            return None
        return repository.update(self.collection, record_id, {field: not bool(record.get(field))})

    def set_flag(self, record_id, field, value=True):
        return get_repository().update(self.collection, record_id, {field: value})
