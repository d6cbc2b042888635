"""Lazy per-service access to factory-built clients."""
from .factory import ClientFactory
from .services import SERVICES


class ClientCache:
    """Exposes one client per service, built on first access.

    Every access goes through the factory, whose memoization keeps the
    instance stable. ``instantiated`` records what has been handed out.
    """

    def __init__(self, defaults=None, use_global_config_clock=None, sdk_config=None):
        self.factory = ClientFactory(defaults, use_global_config_clock, sdk_config)
        self.instantiated = {}

    def get_or_build(self, service_name):
        client = self.instantiated[service_name] = self.factory.create(service_name)
        return client

    def __getitem__(self, service_name):
        if service_name not in SERVICES:
            raise KeyError(service_name)
        return self.get_or_build(service_name)

    def __getattr__(self, name):
        if name.startswith("_") or name not in SERVICES:
            raise AttributeError(name)
        return self.get_or_build(name)


def create_client_cache(defaults=None, use_global_config_clock=None, sdk_config=None):
    """Create a ClientCache backed by a fresh ClientFactory."""
    return ClientCache(defaults, use_global_config_clock, sdk_config)
