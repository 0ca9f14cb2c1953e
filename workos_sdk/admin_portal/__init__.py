"""
Admin Portal API.
"""

from .admin_portal import AdminPortal, AdminPortalIntent

__all__ = ["AdminPortal", "AdminPortalIntent"]
