"""The API client combining every endpoint group."""

from __future__ import annotations

from .connection import ConnectionMixin
from .dialogs import DialogsMixin
from .endpoints import BASE_URL
from .messages import MessagesMixin
from .transport import Transport
from .users import UsersMixin


class Client(ConnectionMixin, DialogsMixin, MessagesMixin, UsersMixin, Transport):
    """Client for the instance API; usable as a context manager."""

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
        super().__init__(
            redirect_uri,
            header,
            token,
            header_chat=header_chat,
            token_chat=token_chat,
            api_base=api_base,
            session=session,
        )