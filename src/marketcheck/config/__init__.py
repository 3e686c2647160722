from marketcheck.config.loader import load_app_config
from marketcheck.config.models import AppConfig

__all__ = ["AppConfig", "load_app_config"]
