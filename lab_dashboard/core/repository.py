"""
Entity repository
Routes each collection to the remote store when it has a backing table,
otherwise to a JSON array in local storage
"""
import logging
import threading
import uuid
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


class EntityRepository:
    """CRUD over dashboard collections"""

    def __init__(self, local_storage, remote_store=None, remote_tables=(), activity_log=None):
        self.local = local_storage
        self.remote = remote_store
        self.remote_tables = set(remote_tables)
        self.activity_log = activity_log
        # Serializes load-modify-save on local collections
        self._local_lock = threading.Lock()

    def is_remote(self, collection):
        """Collections are remote only when a remote store is configured"""
        return self.remote is not None and collection in self.remote_tables

    def _record(self, message, collection, record_id=None):
        if self.activity_log is not None:
            self.activity_log.add('INFO', message, collection=collection, record_id=record_id)

    # Local collection helpers

    def _load_local(self, collection):
        items = self.local.get_item(collection)
        return items if items is not None else []

    def _save_local(self, collection, items):
        self.local.set_item(collection, items)

    # Operations

    def list(self, collection, order=None):
        """Fetch all records of a collection"""
        if self.is_remote(collection):
            return self.remote.select(collection, order=order)
        return self._load_local(collection)

    def list_local(self, collection):
        """Fetch records kept in local storage regardless of remote backing"""
        return self._load_local(collection)

    def insert(self, collection, record):
        """Insert one record and return it with its identifier"""
        if self.is_remote(collection):
            stored = self.remote.insert(collection, record)
        else:
            stored = dict(record)
            stored.setdefault('id', str(uuid.uuid4()))
            stored.setdefault('created_at', _now_iso())
            with self._local_lock:
                items = self._load_local(collection)
                items.insert(0, stored)
                self._save_local(collection, items)

        self._record(f"Added {collection} item {stored.get('id')}", collection, stored.get('id'))
        return stored

    def update(self, collection, record_id, changes):
        """Update one record in place, returning it or None when not found"""
        if self.is_remote(collection):
            updated = self.remote.update(collection, record_id, changes)
        else:
            updated = None
            with self._local_lock:
                items = self._load_local(collection)
                for item in items:
                    if str(item.get('id')) == str(record_id):
                        item.update(changes)
                        updated = item
                        break
                if updated is not None:
                    self._save_local(collection, items)

        if updated is not None:
            self._record(f"Updated {collection} item {record_id}", collection, record_id)
        return updated

    def delete(self, collection, record_id):
        """Delete one record by identifier

        Local collections are rewritten with the matching identifier filtered out.
        """
        if self.is_remote(collection):
            self.remote.delete(collection, record_id)
        else:
            self.delete_local(collection, record_id)

        self._record(f"Deleted {collection} item {record_id}", collection, record_id)

    def delete_local(self, collection, record_id):
        """Filter a record out of the local copy of a collection

        Returns True when something was removed.
        """
        with self._local_lock:
            items = self.local.get_item(collection)
            if items is None:
                return False
            remaining = [item for item in items if str(item.get('id')) != str(record_id)]
            self._save_local(collection, remaining)
        return len(remaining) != len(items)

    def get(self, collection, record_id):
        for item in self.list(collection):
            if str(item.get('id')) == str(record_id):
                return item
        return None
