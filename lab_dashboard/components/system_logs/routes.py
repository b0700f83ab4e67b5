"""
System Logs Component Routes
"""
from flask import Blueprint, jsonify, request

from lab_dashboard.core.auth import protect_blueprint
from .service import SystemLogsService

# Create blueprint for system logs routes
system_logs_bp = Blueprint('system_logs', __name__)
protect_blueprint(system_logs_bp)

# Initialize service
service = SystemLogsService()


@system_logs_bp.route('/api/logs')
def api_logs():
    """Get activity logs with filtering"""
    level_filter = request.args.get('level', 'ALL')
    limit = request.args.get('limit', 50, type=int)

    logs = service.get_logs(level_filter=level_filter, limit=limit)

    return jsonify(logs)
