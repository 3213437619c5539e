"""HTTP transport that authenticates requests and decodes answers."""

from __future__ import annotations

import json

import requests

from .endpoints import BASE_URL
from .errors import APIError, WhatcrmError

# Characters escaped in JSON bodies so they are safe to embed in HTML.
_HTML_ESCAPES = str.maketrans(
    {"&": "\\u0026", "<": "\\u003c", ">": "\\u003e", "\u2028": "\\u2028", "\u2029": "\\u2029"}
)


class Transport:
    """Sends authenticated requests to the instance API."""

    def __init__(
        self,
        redirect_uri,
        header,
        token,
        header_chat=None,
        token_chat=None,
        api_base=BASE_URL,
        session=None,
    ):
        self.redirect_uri = redirect_uri
        self.header = header
        self.token = token
        self.header_chat = header_chat
        self.token_chat = token_chat
        self.api_base = api_base
        self.session = session if session is not None else requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.session.close()

    def send(self, method, url, body=None, sink=None):
        """Send a request and return the decoded JSON answer.

        ``body`` is sent as JSON when given. When ``sink`` is a writable binary
        stream the raw answer is written into it and ``None`` is returned.
        """
        headers = {self.header: self.token} if self.header else {}
        if self.header_chat and self.token_chat is not None:
            headers[self.header_chat] = self.token_chat
        data = None
        if body is not None:
            text = json.dumps(body, ensure_ascii=False, separators=(",", ":"))
            data = text.translate(_HTML_ESCAPES).encode("utf-8")
        try:
            response = self.session.request(method, url, data=data, headers=headers)
        except requests.RequestException as exc:
            raise WhatcrmError(f"request failed: {exc}") from exc

        with response:
            if not 200 <= response.status_code <= 299:
                raise APIError(response.status_code, response.text)
            if sink is not None:
                sink.write(response.content)
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise WhatcrmError(f"invalid JSON in response: {exc}") from exc


def build_query_params_string(params):
    """Join ``params`` into a ``?key=value&...`` string, or ``""`` when empty."""
    if not params:
        return ""
    return "?" + "&".join(f"{key}={value}" for key, value in params.items())