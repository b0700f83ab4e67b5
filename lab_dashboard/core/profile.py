"""
Profile context
One mutable user profile held in process memory and mirrored to local storage
"""
import base64
import copy
import logging
import mimetypes
import threading

logger = logging.getLogger(__name__)


class ProfileContext:
    """Shared, explicitly-owned profile state (last write wins)"""

    def __init__(self, local_storage, defaults, storage_key='userProfile'):
        self.local = local_storage
        self.defaults = copy.deepcopy(defaults)
        self.storage_key = storage_key
        self._lock = threading.Lock()
        self.profile = self._load()

    def _load(self):
        profile = copy.deepcopy(self.defaults)
        try:
            stored = self.local.get_item(self.storage_key)
        except ValueError as e:
            logger.error(f"Failed to parse stored profile: {e}")
            return profile
        if isinstance(stored, dict):
            profile.update(stored)
        return profile

    def get(self):
        with self._lock:
            return copy.deepcopy(self.profile)

    def update(self, changes):
        """Merge changes into the profile and persist the result"""
        with self._lock:
            updated = dict(self.profile)
            updated.update(copy.deepcopy(changes))
            self.local.set_item(self.storage_key, updated)
            self.profile = updated
        logger.info("Profile updated")
        return copy.deepcopy(updated)

    def upload_avatar(self, file_storage):
        """Store an uploaded file as an inline data URL avatar

        file_storage is a werkzeug FileStorage (or anything with read(),
        filename and mimetype).
        """
        data = file_storage.read()
        if not data:
            raise ValueError('Failed to read file')

        mimetype = getattr(file_storage, 'mimetype', None)
        if not mimetype or mimetype == 'application/octet-stream':
            mimetype = mimetypes.guess_type(file_storage.filename or '')[0] or 'application/octet-stream'

        encoded = base64.b64encode(data).decode('ascii')
        avatar = f'data:{mimetype};base64,{encoded}'
        self.update({'avatar': avatar})
        return avatar
