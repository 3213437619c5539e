"""Command line access to a few common API operations."""

from __future__ import annotations

import argparse
import json
import sys

from .client import Client
from .endpoints import BASE_URL, DELETE_DIALOG, REACTION, SEND_MESSAGE
from .errors import WhatcrmError
from .models import Dialog, MessageInput, Reaction


def _add_reaction(client, args):
    reaction = Reaction(chat_id=args.chat_id, message_id=args.message_id, reaction=args.reaction)
    return str(client.add_reaction_to_message(args.chat_key, reaction))


def _delete_dialog(client, args):
    return str(client.delete_dialog(args.chat_key, Dialog(chat_id=args.chat_id)))


def _send_message(client, args):
    message = MessageInput(body=args.body, chat_id=args.chat_id)
    result = client.send_message(args.chat_key, message)
    return json.dumps(result.data.to_dict(), ensure_ascii=False)


def _build_parser():
    parser = argparse.ArgumentParser(prog="whatcrm", description="Talk to a messenger instance.")
    parser.add_argument("--api-base", default=BASE_URL, help="base URL with %%s for the chat key")
    parser.add_argument("--header", default="", help="name of the authorisation header")
    parser.add_argument("--token", default="", help="value of the authorisation header")
    parser.add_argument("--header-chat", default="", help="name of the chat header")
    parser.add_argument("--chat-token", default="", help="value of the chat header")
    parser.add_argument("--chat-key", default="", help="key of the instance")
    commands = parser.add_subparsers(dest="command", required=True)

    reaction = commands.add_parser("reaction", help="react to a message")
    reaction.add_argument("--chat-id", default="")
    reaction.add_argument("--message-id", default="")
    reaction.add_argument("--reaction", default="❤")
    reaction.set_defaults(handler=_add_reaction, endpoint=REACTION)

    delete = commands.add_parser("delete-dialog", help="remove a dialog")
    delete.add_argument("--chat-id", default="")
    delete.set_defaults(handler=_delete_dialog, endpoint=DELETE_DIALOG)

    send = commands.add_parser("send", help="send a text message")
    send.add_argument("--chat-id", default="")
    send.add_argument("--body", default="")
    send.set_defaults(handler=_send_message, endpoint=SEND_MESSAGE)
    return parser


def main(argv=None):
    """Run one command and print its result; return the exit status."""
    args = _build_parser().parse_args(argv)
    client = Client(
        redirect_uri=args.api_base + args.endpoint,
        header=args.header,
        token=args.token,
        header_chat=args.header_chat,
        token_chat=args.chat_token,
        api_base=args.api_base,
    )
    with client:
        try:
            output = args.handler(client, args)
        except WhatcrmError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())