from bloomkit.config.log_setup import configure_logging
from bloomkit.config.settings import SETTINGS, FilterSettings, load_settings

__all__ = ["SETTINGS", "FilterSettings", "configure_logging", "load_settings"]
