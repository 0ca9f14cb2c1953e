"""Webhook event names and the parsers for their ``data`` payloads."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict

from ..directory_sync.types import Directory, DirectoryGroup, DirectoryUser
from ..sso.types import Connection


class WebhookEvent(str, Enum):
    CONNECTION_ACTIVATED = "connection.activated"
    CONNECTION_DEACTIVATED = "connection.deactivated"
    CONNECTION_DELETED = "connection.deleted"
    DIRECTORY_ACTIVATED = "dsync.activated"
    DIRECTORY_DEACTIVATED = "dsync.deactivated"
    DIRECTORY_DELETED = "dsync.deleted"
    DIRECTORY_USER_CREATED = "dsync.user.created"
    DIRECTORY_USER_UPDATED = "dsync.user.updated"
    DIRECTORY_USER_DELETED = "dsync.user.deleted"
    DIRECTORY_GROUP_CREATED = "dsync.group.created"
    DIRECTORY_GROUP_UPDATED = "dsync.group.updated"
    DIRECTORY_GROUP_DELETED = "dsync.group.deleted"
    DIRECTORY_USER_ADDED_TO_GROUP = "dsync.group.user_added"
    DIRECTORY_USER_REMOVED_FROM_GROUP = "dsync.group.user_removed"


@dataclass
class DirectoryGroupMembership:
    directory_id: str
    user: DirectoryUser
    group: DirectoryGroup

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DirectoryGroupMembership":
        return cls(
            directory_id=payload["directory_id"],
            user=DirectoryUser.from_dict(payload["user"]),
            group=DirectoryGroup.from_dict(payload["group"]),
        )


EVENT_DEFINITIONS: Dict[WebhookEvent, Callable[[Dict[str, Any]], Any]] = {
    WebhookEvent.CONNECTION_ACTIVATED: Connection.from_dict,
    WebhookEvent.CONNECTION_DEACTIVATED: Connection.from_dict,
    WebhookEvent.CONNECTION_DELETED: Connection.from_dict,
    WebhookEvent.DIRECTORY_ACTIVATED: Directory.from_dict,
    WebhookEvent.DIRECTORY_DEACTIVATED: Directory.from_dict,
    WebhookEvent.DIRECTORY_DELETED: Directory.from_dict,
    WebhookEvent.DIRECTORY_USER_CREATED: DirectoryUser.from_dict,
    WebhookEvent.DIRECTORY_USER_UPDATED: DirectoryUser.from_dict,
    WebhookEvent.DIRECTORY_USER_DELETED: DirectoryUser.from_dict,
    WebhookEvent.DIRECTORY_GROUP_CREATED: DirectoryGroup.from_dict,
    WebhookEvent.DIRECTORY_GROUP_UPDATED: DirectoryGroup.from_dict,
    WebhookEvent.DIRECTORY_GROUP_DELETED: DirectoryGroup.from_dict,
    WebhookEvent.DIRECTORY_USER_ADDED_TO_GROUP: DirectoryGroupMembership.from_dict,
    WebhookEvent.DIRECTORY_USER_REMOVED_FROM_GROUP: DirectoryGroupMembership.from_dict,
}
