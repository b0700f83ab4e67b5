"""
Tool Library Routes
"""
from flask import Blueprint, render_template, request

from lab_dashboard.components.route_helpers import api_create, api_fetch, load_or_notify, submit_form
from lab_dashboard.core.auth import protect_blueprint
from .service import ToolsService

tools_bp = Blueprint('tools', __name__)
protect_blueprint(tools_bp)

# Service instance
service = ToolsService()

SUGGESTED_TOOL_TYPES = ['model', 'dataset', 'library', 'pipeline', 'visualization', 'utility']


@tools_bp.route('/tools')
def list_page():
    term = request.args.get('q', '')
    tool_type = request.args.get('type', '')

    tools = load_or_notify(service.list_all, 'Failed to fetch tools', service.collection)

    return render_template(
        'tools/list.html',
        tools=service.filter(tools, term, tool_type),
        has_tools=bool(tools),
        tool_types=service.tool_types(tools),
        search_query=term,
        selected_type=tool_type,
    )


@tools_bp.route('/add-tool', methods=['GET', 'POST'])
def add_page():
    if request.method == 'POST':
        return submit_form(
            service,
            success_message='Tool added successfully',
            failure_message='Failed to add tool. Please try again.',
            list_endpoint='tools.list_page',
            template='tools/add.html',
            tool_types=SUGGESTED_TOOL_TYPES,
        )
    return render_template('tools/add.html', form={}, tool_types=SUGGESTED_TOOL_TYPES)


@tools_bp.route('/api/tools', methods=['GET'])
def api_tools():
    term = request.args.get('q', '')
    tool_type = request.args.get('type', '')
    return api_fetch(service, lambda records: service.filter(records, term, tool_type))


@tools_bp.route('/api/tools', methods=['POST'])
def api_add_tool():
    return api_create(service)


def init_tools(app):
    """Initialize Tool Library component with Flask app"""
    app.register_blueprint(tools_bp)
    return tools_bp
