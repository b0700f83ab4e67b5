"""
Literature Management Routes
"""
from flask import Blueprint, redirect, render_template, request, url_for

from lab_dashboard.components.route_helpers import (
    api_create, api_fetch, api_toggle, load_or_notify, record_failure, submit_form,
)
from lab_dashboard.core.auth import protect_blueprint, safe_next_url
from lab_dashboard.core.errors import RemoteStoreError
from lab_dashboard.core.notifications import notify_failure
from .service import LiteratureService

literature_bp = Blueprint('literature', __name__)
protect_blueprint(literature_bp)

# Service instance
service = LiteratureService()


@literature_bp.route('/literature')
def list_page():
    """Browse literature with tag and year filters"""
    term = request.args.get('q', '')
    tag = request.args.get('tag', '')
    year = request.args.get('year', '')

    items = load_or_notify(service.list_all, 'Failed to load literature. Please try again.', service.collection)
    filtered = service.filter(items, term, tag, year)

    return render_template(
        'literature/list.html',
        publications=filtered,
        saved_publications=[p for p in filtered if p.get('saved')],
        all_tags=service.all_tags(items),
        all_years=service.all_years(items),
        search_query=term,
        selected_tag=tag,
        selected_year=year,
    )


@literature_bp.route('/add-literature', methods=['GET', 'POST'])
def add_page():
    if request.method == 'POST':
        return submit_form(
            service,
            success_message='Literature item added successfully',
            failure_message='Failed to add literature. Please try again.',
            list_endpoint='literature.list_page',
            template='literature/add.html',
        )
    return render_template('literature/add.html', form={})


@literature_bp.route('/literature/<record_id>/toggle-saved', methods=['POST'])
def toggle_saved(record_id):
    try:
        if service.toggle_flag(record_id, 'saved') is None:
            notify_failure('Literature item not found')
    except RemoteStoreError as e:
        record_failure(f"Error toggling saved on literature {record_id}: {e}", service.collection, record_id)
        notify_failure('Failed to update literature. Please try again.')
    return redirect(safe_next_url(request.form.get('next'), url_for('literature.list_page')))


@literature_bp.route('/api/literature', methods=['GET'])
def api_literature():
    term = request.args.get('q', '')
    tag = request.args.get('tag', '')
    year = request.args.get('year', '')
    return api_fetch(service, lambda records: service.filter(records, term, tag, year))


@literature_bp.route('/api/literature', methods=['POST'])
def api_add_literature():
    return api_create(service)


@literature_bp.route('/api/literature/<record_id>/saved', methods=['POST'])
def api_toggle_saved(record_id):
    return api_toggle(service, record_id, 'saved')


def init_literature(app):
    """Initialize Literature component with Flask app"""
    app.register_blueprint(literature_bp)
    app.add_template_filter(LiteratureService.author_line, 'author_line')
    return literature_bp
