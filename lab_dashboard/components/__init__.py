"""
Entity registry for the dashboard
Maps each collection name to the service that owns its records, so generic
features (delete control, overview counts) can work on any collection.
"""


class EntityRegistry:
    """Entity services keyed by collection name"""

    def __init__(self):
        self.services = {}

    def register(self, service):
        if not service.collection:
            raise ValueError(f"{type(service).__name__} has no collection")
        self.services[service.collection] = service

    def get(self, collection):
        """Service for a collection, or None when nothing is registered"""
        return self.services.get(collection)

    def collections(self):
        return list(self.services)

    def items(self):
        return self.services.items()

    def __contains__(self, collection):
        return collection in self.services


# Global registry instance
registry = EntityRegistry()


def register_entity(service_class):
    """Class decorator: register one instance under the class's collection"""
    registry.register(service_class())
    return service_class


__all__ = ['EntityRegistry', 'registry', 'register_entity']
