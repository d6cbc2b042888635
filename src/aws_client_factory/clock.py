"""Point the clock offset of botocore client configs at one shared value.

botocore does not read ``system_clock_offset`` when signing requests, so the
shared offset is bookkeeping for callers and does not correct clock skew.
"""
import functools
import logging

from .config import GLOBAL_CONFIG
from .services import unwrap

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def _synced_class(base):
    """Subclass of a config class whose clock offset lives on an SdkConfig."""

    def _get(self):
        return self._shared_clock.system_clock_offset

    def _set(self, value):
        self._shared_clock.system_clock_offset = value

    return type(
        f"ClockSynced{base.__name__}",
        (base,),
        {"_clock_synced": True, "system_clock_offset": property(_get, _set)},
    )


def use_global_config_clock(client, sdk_config=GLOBAL_CONFIG, service=None):
    """Make client read and write its clock offset through sdk_config.

    Resources are unwrapped to their low-level client first. Clients without a
    ``meta.config`` are left alone.
    """
    client = service.unwrap(client) if service is not None else unwrap(client)
    config = getattr(getattr(client, "meta", None), "config", None)
    if config is None:
        return

    if not getattr(type(config), "_clock_synced", False):
        # Drop any plain attribute so the property is not shadowed.
        config.__dict__.pop("system_clock_offset", None)
        config.__class__ = _synced_class(type(config))
    config._shared_clock = sdk_config
    logger.debug(f"Clock offset of {type(client).__name__} synced to shared config")
