"""
Remote data store client
Talks to the hosted relational service through its REST interface
(PostgREST, as exposed by Supabase under /rest/v1)
"""
import logging

import requests

from .errors import RemoteStoreError

logger = logging.getLogger(__name__)


class RemoteStore:
    """Thin client for select/insert/update/delete against remote tables"""

    def __init__(self, base_url, api_key, timeout=10, session=None):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self, prefer=None):
        headers = {
            'apikey': self.api_key,
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        if prefer:
            headers['Prefer'] = prefer
        return headers

    def _table_url(self, table):
        return f'{self.base_url}/rest/v1/{table}'

    def _request(self, method, table, params=None, payload=None, prefer=None):
        """Issue one request and decode the JSON body

        Raises RemoteStoreError on transport failures and non-2xx responses.
        """
        url = self._table_url(table)
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=payload,
                headers=self._headers(prefer),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Remote store {method} {table} failed: {e}")
            raise RemoteStoreError(f'Remote store not accessible: {e}') from e

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error(f"Remote store {method} {table} returned HTTP {response.status_code}: {message}")
            raise RemoteStoreError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return []
        return response.json()

    @staticmethod
    def _error_message(response):
        try:
            body = response.json()
        except ValueError:
            return f'HTTP {response.status_code}'
        if isinstance(body, dict):
            return body.get('message') or body.get('error') or f'HTTP {response.status_code}'
        return f'HTTP {response.status_code}'

    def select(self, table, order=None):
        """Fetch all rows of a table"""
        params = {'select': '*'}
        if order:
            params['order'] = order
        return self._request('GET', table, params=params)

    def insert(self, table, record):
        """Insert one row and return it as stored (with its assigned id)"""
        rows = self._request('POST', table, payload=record, prefer='return=representation')
        return rows[0] if rows else dict(record)

    def update(self, table, record_id, changes):
        """Update one row by id and return the updated row, or None if no row matched"""
        rows = self._request(
            'PATCH', table,
            params={'id': f'eq.{record_id}'},
            payload=changes,
            prefer='return=representation',
        )
        return rows[0] if rows else None

    def delete(self, table, record_id):
        """Delete one row by id"""
        self._request('DELETE', table, params={'id': f'eq.{record_id}'})
