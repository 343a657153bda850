"""
Services Module

- Result / ErrorKind: outcome type returned by service operations
- UserAccountService: user account CRUD over the storage port
"""

from .result import ErrorKind, Result
from .user_service import UserAccountService

__all__ = [
    "ErrorKind",
    "Result",
    "UserAccountService",
]
