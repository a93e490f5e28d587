from .settings import DatabaseSettings, ServerSettings, Settings, get_settings

__all__ = ["DatabaseSettings", "ServerSettings", "Settings", "get_settings"]
