"""
Research Output Routes
"""
from flask import Blueprint, redirect, render_template, request, url_for

from lab_dashboard.components.route_helpers import (
    api_create, api_fetch, api_toggle, load_or_notify, record_failure, submit_form,
)
from lab_dashboard.core.auth import protect_blueprint, safe_next_url
from lab_dashboard.core.errors import RemoteStoreError
from lab_dashboard.core.notifications import notify_failure
from .service import OUTPUT_TYPES, ResearchOutputsService

research_outputs_bp = Blueprint('research_outputs', __name__)
protect_blueprint(research_outputs_bp)

# Service instance
service = ResearchOutputsService()


@research_outputs_bp.route('/research')
def list_page():
    """Research outputs with type tabs, year filter, summary and chart data"""
    term = request.args.get('q', '')
    active_tab = request.args.get('tab', 'all')
    year = request.args.get('year', '')

    outputs = load_or_notify(service.list_all, 'Failed to load research outputs. Please try again.', service.collection)

    return render_template(
        'research/list.html',
        outputs=service.filter(outputs, term, active_tab, year),
        summary=service.summary(outputs),
        publications_by_year=service.publications_by_year(outputs),
        years=service.years(outputs),
        output_types=OUTPUT_TYPES,
        search_query=term,
        active_tab=active_tab,
        year_filter=year,
    )


@research_outputs_bp.route('/add-output', methods=['GET', 'POST'])
def add_page():
    if request.method == 'POST':
        return submit_form(
            service,
            success_message='Research output added successfully',
            failure_message='Failed to add research output. Please try again.',
            list_endpoint='research_outputs.list_page',
            template='research/add.html',
            output_types=OUTPUT_TYPES,
        )
    return render_template('research/add.html', form={}, output_types=OUTPUT_TYPES)


@research_outputs_bp.route('/research/<record_id>/toggle-saved', methods=['POST'])
def toggle_saved(record_id):
    try:
        if service.toggle_flag(record_id, 'saved') is None:
            notify_failure('Research output not found')
    except RemoteStoreError as e:
        record_failure(f"Error toggling saved on research output {record_id}: {e}", service.collection, record_id)
        notify_failure('Failed to update research output. Please try again.')
    return redirect(safe_next_url(request.form.get('next'), url_for('research_outputs.list_page')))


@research_outputs_bp.route('/api/research_outputs', methods=['GET'])
def api_research_outputs():
    term = request.args.get('q', '')
    output_type = request.args.get('type', 'all')
    year = request.args.get('year', '')
    return api_fetch(service, lambda records: service.filter(records, term, output_type, year))


@research_outputs_bp.route('/api/research_outputs', methods=['POST'])
def api_add_research_output():
    return api_create(service)


@research_outputs_bp.route('/api/research_outputs/<record_id>/saved', methods=['POST'])
def api_toggle_saved(record_id):
    return api_toggle(service, record_id, 'saved')


@research_outputs_bp.route('/api/research_outputs/stats')
def api_research_stats():
    """Summary counts and publications-by-year chart data"""
    return api_fetch(service, lambda records: {
        'summary': service.summary(records),
        'publications_by_year': service.publications_by_year(records),
    })


def init_research_outputs(app):
    """Initialize Research Output component with Flask app"""
    app.register_blueprint(research_outputs_bp)
    return research_outputs_bp
