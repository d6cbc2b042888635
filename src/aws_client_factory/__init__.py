"""Memoizing boto3 client factory and AWS constants."""
from .cache import ClientCache, create_client_cache
from .clock import use_global_config_clock
from .config import GLOBAL_CONFIG, Config, SdkConfig
from .constants import REGIONS, SERVICE_PRINCIPALS
from .factory import ClientFactory, canonical_key, create_client_factory
from .services import SERVICES

__all__ = [
    "ClientCache",
    "ClientFactory",
    "Config",
    "GLOBAL_CONFIG",
    "REGIONS",
    "SERVICES",
    "SERVICE_PRINCIPALS",
    "SdkConfig",
    "canonical_key",
    "create_client_cache",
    "create_client_factory",
    "use_global_config_clock",
]
