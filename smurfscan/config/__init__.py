from smurfscan.config.settings import Settings, get_settings, require_api_key, reset_settings

__all__ = ["Settings", "get_settings", "require_api_key", "reset_settings"]
