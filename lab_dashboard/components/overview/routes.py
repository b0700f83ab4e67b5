"""
Dashboard Overview Routes
"""
from flask import Blueprint, current_app, jsonify, render_template

from lab_dashboard.core.auth import protect_blueprint
from .service import OverviewService

overview_bp = Blueprint('overview', __name__)
protect_blueprint(overview_bp)

# Initialize service
service = OverviewService()


@overview_bp.route('/dashboard')
def dashboard():
    """Main dashboard page"""
    overview = service.get_overview(recent_news=current_app.config.get('DASHBOARD_RECENT_NEWS', 3))
    return render_template('dashboard.html', overview=overview)


@overview_bp.route('/api/overview')
def api_overview():
    """Collection counts, recent news and activity volume"""
    return jsonify(service.get_overview(recent_news=current_app.config.get('DASHBOARD_RECENT_NEWS', 3)))


def init_overview(app):
    """Initialize overview component with Flask app"""
    app.register_blueprint(overview_bp)
    return overview_bp
