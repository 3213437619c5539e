"""Exceptions raised by the client."""


class WhatcrmError(Exception):
    """Base class for all client errors."""


class APIError(WhatcrmError):
    """The server answered with a status outside the 2xx range."""

    def __init__(self, status_code, body):
        self.status_code = status_code
        self.body = body
        super().__init__(status_code, body)

    def __str__(self):
        if self.body:
            return self.body
        return f"HTTP status {self.status_code}"