"""Memoized boto3 client constructors, one per known service."""
import functools
import json
import logging

from botocore.config import Config as BotocoreConfig

from .clock import use_global_config_clock
from .config import GLOBAL_CONFIG, Config, factory_defaults
from .services import SERVICES

logger = logging.getLogger(__name__)


def _canonical_value(value):
    if isinstance(value, BotocoreConfig):
        return {"botocore.config.Config": value._user_provided_options}
    return repr(value)


def canonical_key(options):
    """Stable string form of an options mapping, independent of key order."""
    return json.dumps(
        options, sort_keys=True, separators=(",", ":"), default=_canonical_value
    )


class ClientFactory:
    """Builds boto3 clients and returns the same instance for equal options.

    Constructors are available as ``factory["s3"]``, ``factory.s3`` or
    ``factory.create("s3", **options)``.
    """

    def __init__(self, defaults=None, use_global_config_clock=None, sdk_config=None):
        env = Config()
        self.defaults = factory_defaults(env)
        self.defaults.update(defaults or {})
        if use_global_config_clock is None:
            use_global_config_clock = env.use_global_config_clock
        self.use_global_config_clock = use_global_config_clock
        self.sdk_config = sdk_config if sdk_config is not None else GLOBAL_CONFIG
        self.sdk_config.update(self.defaults)
        self._clients = {name: {} for name in SERVICES}

    @property
    def services(self):
        return list(SERVICES)

    def create(self, service_name, **options):
        """Get or create the client for service_name with the given options."""
        service = SERVICES[service_name]
        cached = self._clients[service_name]
        key = canonical_key(options)
        if key not in cached:
            merged = {**self.sdk_config.defaults, **self.defaults, **options}
            logger.debug(f"Creating {service_name} client (options: {sorted(merged)})")
            client = service.build(merged)
            if self.use_global_config_clock:
                use_global_config_clock(client, self.sdk_config, service)
            cached[key] = client
        return cached[key]

    def __getitem__(self, service_name):
        if service_name not in SERVICES:
            raise KeyError(service_name)
        return functools.partial(self.create, service_name)

    def __getattr__(self, name):
        if name.startswith("_") or name not in SERVICES:
            raise AttributeError(name)
        return self[name]

    def __contains__(self, service_name):
        return service_name in SERVICES

    def __iter__(self):
        return iter(SERVICES)


def create_client_factory(defaults=None, use_global_config_clock=None, sdk_config=None):
    """Create a ClientFactory and push its defaults into the shared SDK config."""
    return ClientFactory(defaults, use_global_config_clock, sdk_config)
