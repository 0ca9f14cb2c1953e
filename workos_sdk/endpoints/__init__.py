"""
Endpoint definitions for the WorkOS API.
"""

from .api_endpoints import endpoint_path, get_api_endpoints

__all__ = ["endpoint_path", "get_api_endpoints"]
