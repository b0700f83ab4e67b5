"""
Dashboard exception types
"""


class DashboardError(Exception):
    """Base class for errors surfaced to the user as a notification"""


class RemoteStoreError(DashboardError):
    """A call to the remote data store failed"""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(DashboardError):
    """Required form fields are missing or invalid"""

    def __init__(self, message, fields=None):
        super().__init__(message)
        self.fields = list(fields or [])
