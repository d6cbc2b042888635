"""Configuration from environment variables and shared SDK settings."""
import os


class Config:
    """Configuration from environment variables."""

    def __init__(self):
        self.region = os.getenv("AWS_REGION") or None
        self.use_global_config_clock = (
            os.getenv("USE_GLOBAL_CONFIG_CLOCK", "false").lower() == "true"
        )


class SdkConfig:
    """Settings shared by every factory that is handed the same instance."""

    def __init__(self, **defaults):
        self.defaults = {}
        self.system_clock_offset = 0
        self.update(defaults)

    def update(self, options):
        """Merge options into the shared defaults."""
        self.defaults.update(options)


GLOBAL_CONFIG = SdkConfig()


def factory_defaults(config=None):
    """Default client options taken from the environment."""
    config = config or Config()
    if config.region:
        return {"region_name": config.region}
    return {}
