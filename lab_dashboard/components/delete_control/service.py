"""
Delete Control Service
Resolves a collection name to its registered entity service and deletes by id
"""
from lab_dashboard.components import registry


class DeleteControlService:
    """Generic delete affordance shared by every entity page"""

    def resolve(self, collection):
        service = registry.get(collection)
        if service is None:
            raise ValueError(f"Unknown collection: {collection}")
        return service

    def delete(self, collection, record_id):
        """Delete one record; returns the service's display name for messages"""
        service = self.resolve(collection)
        service.delete(record_id)
        return service.item_name

    def item_name(self, collection):
        return self.resolve(collection).item_name
