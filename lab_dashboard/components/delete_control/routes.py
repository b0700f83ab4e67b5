"""
Delete Control Routes
"""
from flask import Blueprint, abort, jsonify, redirect, request, url_for

from lab_dashboard.components.route_helpers import record_failure
from lab_dashboard.core.auth import protect_blueprint, safe_next_url
from lab_dashboard.core.errors import RemoteStoreError
from lab_dashboard.core.notifications import notify, notify_failure
from .service import DeleteControlService

delete_control_bp = Blueprint('delete_control', __name__)
protect_blueprint(delete_control_bp)

# Service instance
service = DeleteControlService()


@delete_control_bp.route('/delete/<collection>/<record_id>', methods=['POST'])
def delete_item(collection, record_id):
    """Delete from a list page, then return to it"""
    try:
        item_name = service.item_name(collection)
    except ValueError:
        abort(404)

    try:
        service.delete(collection, record_id)
        notify('Deleted successfully', f'The {item_name.lower()} has been deleted.')
    except RemoteStoreError as e:
        record_failure(f"Error deleting {collection}/{record_id}: {e}", collection, record_id)
        notify_failure(f'Failed to delete {item_name.lower()}. Please try again.', title='Delete failed')

    return redirect(safe_next_url(request.form.get('next'), url_for(f'{collection}.list_page')))


@delete_control_bp.route('/api/<collection>/<record_id>', methods=['DELETE'])
def api_delete_item(collection, record_id):
    try:
        item_name = service.delete(collection, record_id)
    except ValueError as e:
        return jsonify({'error': str(e)}), 404
    except RemoteStoreError as e:
        record_failure(f"API delete {collection}/{record_id} failed: {e}", collection, record_id)
        return jsonify({'error': str(e)}), 502

    return jsonify({'success': True, 'message': f'The {item_name.lower()} has been deleted.'})


def init_delete_control(app):
    """Initialize delete control component with Flask app"""
    app.register_blueprint(delete_control_bp)
    return delete_control_bp
