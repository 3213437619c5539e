"""Endpoints that read, send, edit and react to messages."""

from __future__ import annotations

from urllib.parse import quote_plus

from .endpoints import EDIT_MESSAGE, MESSAGES, REACTION, SEND_MESSAGE, instance_url
from .errors import WhatcrmError
from .models import Message, MessageResponse, Response


def _object(payload, what):
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise WhatcrmError(f"unexpected answer: expected {what}")
    return payload


class MessagesMixin:
    """Message operations; mixed into a class that provides ``send``."""

    def get_messages_from_dialog(self, chat_key, dialog_id):
        """Return the messages of a dialog; null entries stay ``None``."""
        url = instance_url(MESSAGES, chat_key, self.api_base)
        payload = self.send("GET", f"{url}?chatId={quote_plus(dialog_id)}")
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise WhatcrmError("unexpected answer: expected a list of messages")
        return [None if item is None else Message.from_dict(item) for item in payload]

    def _post_for_success(self, endpoint, chat_key, body):
        url = instance_url(endpoint, chat_key, self.api_base)
        payload = self.send("POST", url, body)
        return Response.from_dict(_object(payload, "a response object")).success

    def add_reaction_to_message(self, chat_key, reaction):
        """Attach ``reaction`` to a message; return whether it succeeded."""
        return self._post_for_success(REACTION, chat_key, reaction.to_dict())

    def edit_message(self, chat_key, message):
        """Replace a message with ``message``; return whether it succeeded."""
        return self._post_for_success(EDIT_MESSAGE, chat_key, message.to_dict())

    def send_message(self, chat_key, message):
        """Send a message and return the server's record of it."""
        url = instance_url(SEND_MESSAGE, chat_key, self.api_base)
        payload = self.send("POST", url, message.to_dict())
        return MessageResponse.from_dict(_object(payload, "a message response"))

    def send_file(self, chat_key, message):
        """Send a message carrying ``file_url``; same endpoint as a text message."""
        return self.send_message(chat_key, message)