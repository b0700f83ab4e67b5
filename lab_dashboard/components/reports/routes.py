"""
Report Hub Routes
"""
from flask import Blueprint, render_template, request

from lab_dashboard.components.route_helpers import api_create, api_fetch, load_or_notify, submit_form
from lab_dashboard.core.auth import protect_blueprint
from .service import REPORT_TYPES, ReportsService

reports_bp = Blueprint('reports', __name__)
protect_blueprint(reports_bp)

# Service instance
service = ReportsService()


@reports_bp.route('/reports')
def list_page():
    """Browse, search and filter reports"""
    term = request.args.get('q', '')
    report_type = request.args.get('type', '')

    reports = load_or_notify(service.list_all, 'Failed to load reports. Please try again.', service.collection)
    profile = service.profile()

    return render_template(
        'reports/list.html',
        reports=service.filter(reports, term, report_type),
        my_reports=service.authored_by(reports, profile['name']),
        report_types=REPORT_TYPES,
        search_query=term,
        selected_type=report_type,
    )


@reports_bp.route('/add-report', methods=['GET', 'POST'])
def add_page():
    if request.method == 'POST':
        return submit_form(
            service,
            success_message='Report added successfully',
            failure_message='Failed to add report. Please try again.',
            list_endpoint='reports.list_page',
            template='reports/add.html',
            report_types=REPORT_TYPES,
        )
    return render_template('reports/add.html', form={}, report_types=REPORT_TYPES)


@reports_bp.route('/api/reports', methods=['GET'])
def api_reports():
    term = request.args.get('q', '')
    report_type = request.args.get('type', '')
    return api_fetch(service, lambda records: service.filter(records, term, report_type))


@reports_bp.route('/api/reports', methods=['POST'])
def api_add_report():
    return api_create(service)


def init_reports(app):
    """Initialize Report Hub component with Flask app"""
    app.register_blueprint(reports_bp)
    return reports_bp
