"""Endpoints that list, inspect, pin and remove dialogs."""

from __future__ import annotations

from urllib.parse import quote_plus

from .endpoints import (
    DELETE_DIALOG,
    DIALOG,
    DIALOGS,
    PIN_CHAT,
    READ_DIALOG,
    UNPIN_CHAT,
    instance_url,
)
from .errors import WhatcrmError
from .models import Dialog, Response


def _object(payload, what):
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise WhatcrmError(f"unexpected answer: expected {what}")
    return payload


class DialogsMixin:
    """Dialog operations; mixed into a class that provides ``send``."""

    def get_dialogs(self, chat_key):
        """Return every dialog of the instance."""
        payload = self.send("GET", instance_url(DIALOGS, chat_key, self.api_base))
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise WhatcrmError("unexpected answer: expected a list of dialogs")
        return [Dialog.from_dict(item) for item in payload if item is not None]

    def get_dialog_info(self, chat_key, dialog):
        """Return the full record of ``dialog``, looked up by its chat id."""
        url = instance_url(DIALOG, chat_key, self.api_base)
        payload = self.send("GET", url, dialog.chat_id)
        return Dialog.from_dict(_object(payload, "a dialog object"))

    def read_dialog(self, chat_key, dialog_id):
        """Mark the dialog as read and return the server's answer."""
        url = instance_url(READ_DIALOG, chat_key, self.api_base)
        payload = self.send("GET", f"{url}?chatId={quote_plus(dialog_id)}")
        return Response.from_dict(_object(payload, "a response object"))

    def _toggle_pin(self, endpoint, chat_key, dialog_id):
        url = instance_url(endpoint, chat_key, self.api_base)
        payload = self.send("GET", url, dialog_id)
        return Response.from_dict(_object(payload, "a response object")).success

    def pin_dialog(self, chat_key, dialog_id):
        """Pin a dialog; return whether the server reported success."""
        return self._toggle_pin(PIN_CHAT, chat_key, dialog_id)

    def unpin_dialog(self, chat_key, dialog_id):
        """Unpin a dialog; return whether the server reported success."""
        return self._toggle_pin(UNPIN_CHAT, chat_key, dialog_id)

    def delete_dialog(self, chat_key, dialog):
        """Remove ``dialog``; return whether the server reported success."""
        url = instance_url(DELETE_DIALOG, chat_key, self.api_base)
        payload = self.send("POST", url, dialog.chat_id)
        return Response.from_dict(_object(payload, "a response object")).success