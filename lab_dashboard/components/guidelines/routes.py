"""
Guidelines Routes
"""
from flask import Blueprint, render_template, request

from lab_dashboard.components.route_helpers import api_create, api_fetch, submit_form
from lab_dashboard.core.auth import protect_blueprint
from .service import GUIDELINE_CATEGORIES, GuidelinesService

guidelines_bp = Blueprint('guidelines', __name__)
protect_blueprint(guidelines_bp)

# Service instance
service = GuidelinesService()


@guidelines_bp.route('/guidelines')
def list_page():
    term = request.args.get('q', '')
    guidelines = service.filter(service.list_all(), term)

    return render_template(
        'guidelines/list.html',
        guidelines_by_category=service.group_by_category(guidelines),
        search_query=term,
    )


@guidelines_bp.route('/add-guideline', methods=['GET', 'POST'])
def add_page():
    if request.method == 'POST':
        return submit_form(
            service,
            success_message='Guideline added successfully',
            failure_message='Failed to add guideline. Please try again.',
            list_endpoint='guidelines.list_page',
            template='guidelines/add.html',
            categories=GUIDELINE_CATEGORIES,
        )
    return render_template('guidelines/add.html', form={}, categories=GUIDELINE_CATEGORIES)


@guidelines_bp.route('/api/guidelines', methods=['GET'])
def api_guidelines():
    term = request.args.get('q', '')
    return api_fetch(service, lambda records: service.filter(records, term))


@guidelines_bp.route('/api/guidelines', methods=['POST'])
def api_add_guideline():
    return api_create(service)


def init_guidelines(app):
    """Initialize Guidelines component with Flask app"""
    app.register_blueprint(guidelines_bp)
    return guidelines_bp
