"""
List filtering helpers shared by the entity pages
"""


def split_csv(value):
    """Split a comma-separated string into trimmed, non-empty items"""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [part.strip() for part in str(value).split(',') if part.strip()]


def _field_contains(value, needle):
    if value is None:
        return False
    if isinstance(value, (list, tuple)):
        return any(needle in str(v).lower() for v in value)
    return needle in str(value).lower()


def matches_search(record, term, fields):
    """Case-insensitive substring match across the given fields

    An empty term matches every record.
    """
    if not term:
        return True
    needle = term.strip().lower()
    if not needle:
        return True
    return any(_field_contains(record.get(field), needle) for field in fields)


def filter_records(records, term, fields, equals=None, contains=None):
    """Apply a search term plus optional equality and membership filters

    equals: {field: value} exact matches, values compared as strings;
            empty values and 'all' are ignored
    contains: {field: value} where the field is an array that must include value
    """
    equals = {k: v for k, v in (equals or {}).items() if v not in (None, '', 'all')}
    contains = {k: v for k, v in (contains or {}).items() if v not in (None, '')}

    result = []
    for record in records:
        if not matches_search(record, term, fields):
            continue
        if any(str(record.get(k)) != str(v) for k, v in equals.items()):
            continue
        if any(v not in (record.get(k) or []) for k, v in contains.items()):
            continue
        result.append(record)
    return result


def unique_values(records, field, reverse=False):
    """Sorted unique values of a scalar or array field"""
    values = set()
    for record in records:
        value = record.get(field)
        if isinstance(value, (list, tuple)):
            values.update(value)
        elif value not in (None, ''):
            values.add(value)
    return sorted(values, reverse=reverse)


def missing_fields(data, required):
    """Names of required fields that are absent or blank"""
    missing = []
    for field in required:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    return missing
