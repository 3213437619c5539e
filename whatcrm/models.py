"""Data records exchanged with the instance API."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

_ZERO_TIME = "0001-01-01T00:00:00Z"
_FRACTION = re.compile(r"\.(\d+)")


def _get(data, key, default=None):
    """Look up ``key``, matching case-insensitively when there is no exact key."""
    value = data.get(key)
    if value is None and key not in data:
        folded = key.casefold()
        value = next((v for k, v in data.items() if k.casefold() == folded), None)
    return default if value is None else value


def _str(data, key):
    return str(_get(data, key, ""))


def _int(data, key):
    return int(_get(data, key, 0))


def _bool(data, key):
    return bool(_get(data, key, False))


def _time(data, key):
    value = _get(data, key)
    if value in (None, "", _ZERO_TIME):
        return None
    text = re.sub(r"[Zz]$", "+00:00", str(value).strip())
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"invalid timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp without offset: {value!r}")
    return parsed


def _format_time(value):
    if value is None:
        return _ZERO_TIME
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    minutes = abs(int(offset.total_seconds())) // 60
    sign = "-" if offset < timedelta(0) else "+"
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass
class Response:
    """Generic ``success``/``data`` answer."""

    success: bool = False
    data: Any = None

    @classmethod
    def from_dict(cls, data):
        return cls(success=_bool(data, "success"), data=_get(data, "data"))


@dataclass
class Status:
    """Connection state of an instance."""

    state: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(state=_str(data, "state"))


# JSON keys of instance attributes whose name differs from the key.
_INSTANCE_KEYS = {
    "pipeline_id": "pipelineId",
    "stage_id": "stageId",
    "instance_id": "instanceId",
    "create_new_if_close": "createNewIfClose",
    "wid": "WID",
    "language_code": "LanguageCode",
    "pushname": "Pushname",
}


@dataclass
class Instance:
    """A messenger connection registered for an account."""

    id: int = 0
    apikey: str = ""
    phone: str = ""
    name: str = ""
    label: str = ""
    platform: str = ""
    status: str = ""
    version: str = ""
    tariff_id: int = 0
    tariff_plane: str = ""
    pipeline_id: int = 0
    stage_id: int = 0
    chat_id: str = ""
    instance_id: str = ""
    chat_token: str = ""
    chat_key: str = ""
    date_add: int = 0
    date_trial: int = 0
    date_pay: int = 0
    date_subscription: int = 0
    is_premium: int = 0
    is_group: bool = False
    strategy: str = ""
    responsible_id: list[int] = field(default_factory=list)
    create_new_if_close: bool = False
    wid: str = ""
    language_code: str = ""
    pushname: str = ""

    @classmethod
    def from_dict(cls, data):
        convert = {int: _int, bool: _bool, str: _str, "int": _int, "bool": _bool, "str": _str}
        values = {
            name: convert[kind](data, _INSTANCE_KEYS.get(name, name))
            for name, kind in cls.__annotations__.items()
            if name != "responsible_id"
        }
        values["responsible_id"] = [int(v) for v in _get(data, "responsibleId", [])]
        return cls(**values)


@dataclass
class User:
    """A contact or a manager taking part in a dialog."""

    id: str = ""
    chat_id: str = ""
    domain: str = ""
    name: str = ""
    role: str = ""
    status: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(**{name: _str(data, name) for name in cls.__annotations__})

    def to_dict(self):
        return {name: getattr(self, name) for name in self.__annotations__}


@dataclass
class Reaction:
    """An emoji reaction attached to a message."""

    chat_id: str = ""
    message_id: str = ""
    reaction: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(**{name: _str(data, name) for name in cls.__annotations__})

    def to_dict(self):
        return {name: getattr(self, name) for name in self.__annotations__}


@dataclass
class Button:
    """A reply button shown under a message."""

    id: int = 0
    body: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(id=_int(data, "id"), body=_str(data, "body"))

    def to_dict(self):
        return {"id": self.id, "body": self.body}


@dataclass
class Message:
    """A message of a dialog."""

    id: str = ""
    content: str = ""
    type: str = ""
    file_url: str = ""
    dialog_id: str = ""
    sender_id: str = ""
    created_at: datetime | None = None
    is_edited: bool = False
    edited_at: datetime | None = None
    editable: bool = False
    deleted_at: datetime | None = None
    deleted_status: str = ""
    deleted_for_user_id: str = ""
    status: str = ""
    reactions: list[Reaction] = field(default_factory=list)
    quoted_message_id: str = ""
    timeout: int = 0
    buttons: list[Button] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=_str(data, "id"),
            content=_str(data, "content"),
            type=_str(data, "type"),
            file_url=_str(data, "file_url"),
            dialog_id=_str(data, "dialog_id"),
            sender_id=_str(data, "sender_id"),
            created_at=_time(data, "timestamp"),
            is_edited=_bool(data, "is_edited"),
            edited_at=_time(data, "edited_at"),
            editable=_bool(data, "editable"),
            deleted_at=_time(data, "deleted_at"),
            deleted_status=_str(data, "deleted_status"),
            deleted_for_user_id=_str(data, "deleted_for"),
            status=_str(data, "status"),
            reactions=[Reaction.from_dict(r) for r in _get(data, "reactions", [])],
            quoted_message_id=_str(data, "quotedMsgId"),
            timeout=_int(data, "timeout"),
            buttons=[Button.from_dict(b) for b in _get(data, "buttons", [])],
        )

    def to_dict(self):
        result = {"id": self.id} if self.id else {}
        result.update(
            content=self.content,
            type=self.type,
            file_url=self.file_url,
            dialog_id=self.dialog_id,
            sender_id=self.sender_id,
            timestamp=_format_time(self.created_at),
            is_edited=self.is_edited,
            edited_at=_format_time(self.edited_at),
            editable=self.editable,
            deleted_at=_format_time(self.deleted_at),
            deleted_status=self.deleted_status,
            deleted_for=self.deleted_for_user_id,
            status=self.status,
            reactions=[r.to_dict() for r in self.reactions],
            quotedMsgId=self.quoted_message_id,
        )
        if self.timeout:
            result["timeout"] = self.timeout
        if self.buttons:
            result["buttons"] = [b.to_dict() for b in self.buttons]
        return result


@dataclass
class MessageInput:
    """A message or file to be sent to a chat."""

    body: str = ""
    chat_id: str = ""
    quoted_message_id: str = ""
    file_url: str = ""

    def to_dict(self):
        return {
            "body": self.body,
            "chatId": self.chat_id,
            "quotedMsgId": self.quoted_message_id,
            "file_url": self.file_url,
        }


@dataclass
class MessageResponse:
    """The answer to a sent message."""

    data: Message = field(default_factory=Message)

    @classmethod
    def from_dict(cls, data):
        return cls(data=Message.from_dict(_get(data, "message", {})))


@dataclass
class Dialog:
    """A conversation between a guest and managers."""

    id: str = ""
    chat_id: str = ""
    guest: User = field(default_factory=User)
    managers: list[User] = field(default_factory=list)
    type: str = ""
    created_at: datetime | None = None
    last_active_time: datetime | None = None
    status: str = ""
    last_message: Message = field(default_factory=Message)
    is_pinned: bool = False
    version: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=_str(data, "id"),
            chat_id=_str(data, "chat_id"),
            guest=User.from_dict(_get(data, "guest", {})),
            managers=[User.from_dict(m) for m in _get(data, "managers", []) if m is not None],
            type=_str(data, "type"),
            created_at=_time(data, "created_at"),
            last_active_time=_time(data, "last_active_time"),
            status=_str(data, "status"),
            last_message=Message.from_dict(_get(data, "last_message", {})),
            is_pinned=_bool(data, "is_pinned"),
            version=_str(data, "version"),
        )

    def to_dict(self):
        result = {"id": self.id} if self.id else {}
        result["chat_id"] = self.chat_id
        result["guest"] = self.guest.to_dict()
        if self.managers:
            result["managers"] = [m.to_dict() for m in self.managers]
        result.update(
            type=self.type,
            created_at=_format_time(self.created_at),
            last_active_time=_format_time(self.last_active_time),
            status=self.status,
            last_message=self.last_message.to_dict(),
            is_pinned=self.is_pinned,
            version=self.version,
        )
        return result