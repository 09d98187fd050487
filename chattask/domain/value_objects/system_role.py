"""
SystemRole - Role names the services rely on being present.

Roles are process-wide reference data stored in the database; these names are
looked up on every operation that needs them, so a missing row surfaces as an
error at call time rather than at startup.
"""

from enum import Enum


class SystemRole(str, Enum):
    OWNER = "owner"
    MAIN = "main"
    BANNED = "banned"
