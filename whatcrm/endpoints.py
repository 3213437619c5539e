"""Base URL and endpoint paths of the instance API."""

BASE_URL = "https://dev.whatcrm.net/instances/%s"

DIALOGS = "/dialogs"
READ_DIALOG = "/readChat"
PIN_CHAT = "/pinChat"
UNPIN_CHAT = "/unpinChat"
DIALOG = "/dialog"
DELETE_DIALOG = "/removeChat"
CONNECTION = "/me"
CONNECTION_STATUS = "/status"
USER = "/contact/%s"
MESSAGES = "/messages"
SEND_MESSAGE = "/sendMessage"
REACTION = "/reaction"
EDIT_MESSAGE = "/editMessage"


def instance_url(endpoint, chat_key, api_base=BASE_URL):
    """Return the URL of ``endpoint`` for the instance identified by ``chat_key``."""
    return api_base.replace("%s", chat_key, 1) + endpoint