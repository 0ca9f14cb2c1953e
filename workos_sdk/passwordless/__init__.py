"""
Passwordless API.
"""

from .passwordless import Passwordless, PasswordlessSession

__all__ = ["Passwordless", "PasswordlessSession"]
