"""Endpoint that returns a contact's details."""

from __future__ import annotations

from .endpoints import USER, instance_url
from .errors import WhatcrmError
from .models import User


class UsersMixin:
    """Contact lookups; mixed into a class that provides ``send``."""

    def get_contact_info(self, chat_key, user_id):
        """Return the contact ``user_id`` of the instance ``chat_key``."""
        url = instance_url(USER.replace("%s", user_id, 1), chat_key, self.api_base)
        payload = self.send("GET", url)
        if payload is None:
            return User()
        if not isinstance(payload, dict):
            raise WhatcrmError("unexpected answer: expected a user object")
        return User.from_dict(payload)