"""
Request handling shared by the entity component routes
Remote failures are caught here, recorded in the activity log at ERROR and
surfaced as a notification; state is left untouched when a call fails.
"""
from flask import jsonify, redirect, render_template, request, url_for

from lab_dashboard.core import get_activity_log
from lab_dashboard.core.errors import RemoteStoreError, ValidationError
from lab_dashboard.core.notifications import notify_failure, notify_success


def record_failure(message, collection=None, record_id=None):
    """Add an ERROR entry to the activity log (also written to the module logger)"""
    get_activity_log().add('ERROR', message, collection=collection, record_id=record_id)


def load_or_notify(loader, failure_message, collection=None):
    """Run a fetch, returning [] and queuing a notification if the store fails"""
    try:
        return loader()
    except RemoteStoreError as e:
        record_failure(f"{failure_message} ({e})", collection)
        notify_failure(failure_message)
        return []


def submit_form(service, success_message, failure_message, list_endpoint, template, **context):
    """Create a record from the posted form and redirect to its list page"""
    form = request.form.to_dict()
    try:
        service.create(form)
    except ValidationError as e:
        notify_failure(_validation_message(e), title='Required fields missing')
        return render_template(template, form=form, **context), 400
    except RemoteStoreError as e:
        record_failure(f"Error adding {service.item_name.lower()}: {e}", service.collection)
        notify_failure(failure_message)
        return render_template(template, form=form, **context), 502

    notify_success(success_message)
    return redirect(url_for(list_endpoint))


def api_create(service):
    """JSON insert endpoint body"""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'No data received'}), 400
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400
    try:
        record = service.create(data)
    except ValidationError as e:
        return jsonify({'error': str(e), 'fields': e.fields}), 400
    except RemoteStoreError as e:
        record_failure(f"API insert into {service.collection} failed: {e}", service.collection)
        return jsonify({'error': str(e)}), 502
    return jsonify(record), 201


def api_fetch(service, filter_records):
    """JSON list endpoint body; filter_records receives the full record list"""
    try:
        records = service.list_all()
    except RemoteStoreError as e:
        record_failure(f"API fetch of {service.collection} failed: {e}", service.collection)
        return jsonify({'error': str(e)}), 502
    return jsonify(filter_records(records))


def api_toggle(service, record_id, field):
    """Flip a boolean flag and return the updated record"""
    try:
        record = service.toggle_flag(record_id, field)
    except RemoteStoreError as e:
        record_failure(f"Toggling {field} on {service.collection}/{record_id} failed: {e}",
                       service.collection, record_id)
        return jsonify({'error': str(e)}), 502
    if record is None:
        return jsonify({'error': f'{service.item_name} not found'}), 404
    return jsonify(record)


def _validation_message(error):
    if error.fields:
        return f"{error} ({', '.join(error.fields)})"
    return str(error)
