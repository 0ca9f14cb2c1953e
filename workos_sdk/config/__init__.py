"""
Configuration management for the WorkOS SDK.
"""

from .config_loader import ConfigLoader
from .settings import DEFAULT_BASE_URL, ClientSettings, load_client_settings

__all__ = ["ConfigLoader", "ClientSettings", "DEFAULT_BASE_URL", "load_client_settings"]
