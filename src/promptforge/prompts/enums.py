"""Enumerations for prompt composition.

This module defines the conventional speaker roles used by role messages.
"""

from enum import Enum


class MessageRole(str, Enum):
    """Conventional speaker roles for role-prefixed messages.

    Roles are plain data on RoleMessage, so any other string may be used
    as well; these values only name the common vocabulary.
    """

    SYSTEM = "System"
    USER = "User"
    ASSISTANT = "Assistant"
