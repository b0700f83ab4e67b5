"""
Core services for dashboard components
Shared state lives in app.extensions so every component sees the same objects
"""
import logging

from flask import current_app

from .activity import ActivityLog
from .errors import DashboardError, RemoteStoreError, ValidationError
from .local_storage import LocalStorage
from .profile import ProfileContext
from .remote_store import RemoteStore
from .repository import EntityRepository

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'lab_dashboard'


class CoreState:
    """Objects shared by all components of one application"""

    def __init__(self, local_storage, remote_store, repository, profile, activity_log):
        self.local_storage = local_storage
        self.remote_store = remote_store
        self.repository = repository
        self.profile = profile
        self.activity_log = activity_log


def init_core(app):
    """Build the shared stores from the app configuration"""
    config = app.config
    local_storage = LocalStorage(config['LOCAL_STORAGE_DIR'])

    remote_store = None
    if config.get('SUPABASE_URL') and config.get('SUPABASE_KEY'):
        remote_store = RemoteStore(
            config['SUPABASE_URL'],
            config['SUPABASE_KEY'],
            timeout=config.get('REMOTE_TIMEOUT', 10),
        )
        logger.info(f"Using remote data store at {config['SUPABASE_URL']}")
    else:
        logger.warning("SUPABASE_URL/SUPABASE_KEY not set - all collections use local storage")

    activity_log = ActivityLog(maxlen=config.get('MAX_LOG_ENTRIES', 1000))
    repository = EntityRepository(
        local_storage,
        remote_store=remote_store,
        remote_tables=config.get('REMOTE_TABLES', ()),
        activity_log=activity_log,
    )
    profile = ProfileContext(
        local_storage,
        config['DEFAULT_PROFILE'],
        storage_key=config.get('PROFILE_KEY', 'userProfile'),
    )

    state = CoreState(local_storage, remote_store, repository, profile, activity_log)
    app.extensions[EXTENSION_KEY] = state
    return state


def get_state():
    return current_app.extensions[EXTENSION_KEY]


def get_repository():
    return get_state().repository


def get_local_storage():
    return get_state().local_storage


def get_profile_context():
    return get_state().profile


def get_activity_log():
    return get_state().activity_log


__all__ = [
    'CoreState',
    'init_core',
    'get_state',
    'get_repository',
    'get_local_storage',
    'get_profile_context',
    'get_activity_log',
    'DashboardError',
    'RemoteStoreError',
    'ValidationError',
]
