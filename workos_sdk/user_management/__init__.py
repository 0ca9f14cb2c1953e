"""
User Management API.
"""

from .user_management import AuthenticateWithCodeResponse, User, UserManagement

__all__ = ["AuthenticateWithCodeResponse", "User", "UserManagement"]
