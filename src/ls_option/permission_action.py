"""Permission action enum for handling unreadable directories during listing."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be read while listing.

    Values:
        IGNORE: Skip the unreadable subtree and keep everything else (default behavior)
        RAISE: Abort the listing and raise the error to the caller
    """

    IGNORE = "ignore"
    RAISE = "raise"
