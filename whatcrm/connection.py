"""Endpoints that describe the messenger connections of an account."""

from __future__ import annotations

from .endpoints import CONNECTION, CONNECTION_STATUS, instance_url
from .errors import WhatcrmError
from .models import Instance, Status


class ConnectionMixin:
    """Connection lookups; mixed into a class that provides ``send``."""

    def get_instances(self, chat_key):
        """Return every connection registered under ``chat_key``."""
        url = instance_url(CONNECTION, chat_key, self.api_base)
        payload = self.send("GET", url)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise WhatcrmError("unexpected answer: expected a list of instances")
        return [Instance.from_dict(item) for item in payload if item is not None]

    def get_instance(self, domain, chat_key):
        """Return the connection of ``domain`` whose chat key is ``chat_key``."""
        found = next(
            (inst for inst in self.get_instances(domain) if inst.chat_key == chat_key),
            None,
        )
        if found is None:
            raise WhatcrmError("connection is not found")
        return found

    def get_connection_status(self, chat_key):
        """Return the state of the connection identified by ``chat_key``."""
        url = instance_url(CONNECTION_STATUS, chat_key, self.api_base)
        payload = self.send("GET", url)
        if payload is None:
            return Status().state
        if not isinstance(payload, dict):
            raise WhatcrmError("unexpected answer: expected a status object")
        return Status.from_dict(payload).state