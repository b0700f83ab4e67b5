"""
Modular Research Lab Dashboard
Clean, maintainable Flask application
"""
import logging
import os

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Import modular components
from lab_dashboard.config.settings import DashboardConfig
from lab_dashboard.core import init_core
from lab_dashboard.routes.main_routes import main_bp, page_not_found

from lab_dashboard.components.reports import init_reports
from lab_dashboard.components.literature import init_literature
from lab_dashboard.components.research_outputs import init_research_outputs
from lab_dashboard.components.tools import init_tools
from lab_dashboard.components.guidelines import init_guidelines
from lab_dashboard.components.news import init_news
from lab_dashboard.components.delete_control import init_delete_control
from lab_dashboard.components.profile import init_profile
from lab_dashboard.components.system_logs import init_system_logs
from lab_dashboard.components.overview import init_overview

from lab_dashboard.core.auth import current_user
from lab_dashboard.core.notifications import pop_notifications

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class DashboardApp:
    """Main dashboard application class"""

    def __init__(self):
        self.app = None
        self.state = None

    def create_app(self, config_overrides=None):
        """Create and configure Flask application"""
        # Templates and static files ship inside the package
        self.app = Flask(
            __name__,
            template_folder=os.path.join(BASE_DIR, 'templates'),
            static_folder=os.path.join(BASE_DIR, 'static'),
        )

        # Load configuration
        self.app.config.from_object(DashboardConfig)
        if config_overrides:
            self.app.config.update(config_overrides)

        # Initialize extensions
        Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI'],
        )

        # Shared stores, profile and activity log
        self.state = init_core(self.app)

        # Initialize components
        init_reports(self.app)
        init_literature(self.app)
        init_research_outputs(self.app)
        init_tools(self.app)
        init_guidelines(self.app)
        init_news(self.app)
        init_delete_control(self.app)
        init_profile(self.app)
        init_system_logs(self.app)
        init_overview(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)
        self.app.register_error_handler(404, page_not_found)
        self.app.context_processor(self._layout_context)

        return self.app

    def _layout_context(self):
        """Values every page of the layout needs"""
        return {
            'nav_items': self.app.config['NAV_ITEMS'],
            'profile': self.state.profile.get(),
            'current_user': current_user(),
            'notifications': pop_notifications(),
        }

    def run(self, host='0.0.0.0', port=8081):
        """Start the dashboard application"""
        self.state.activity_log.add('INFO', 'Dashboard started')
        logger.info(f"Research Lab Dashboard starting on http://localhost:{port}")
        self.app.run(host=host, port=port, debug=False)


def create_app(config_overrides=None):
    return DashboardApp().create_app(config_overrides)


def main():
    """Main entry point"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    dashboard = DashboardApp()
    dashboard.create_app()
    dashboard.run(port=int(os.environ.get('PORT', '8081')))


if __name__ == '__main__':
    main()
