# whatcrm

A small Python client for the WhatCRM instances API. It looks up messenger
connections, lists and manages dialogs, reads, sends and edits messages,
adds reactions and fetches contact details.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Create a `whatcrm.client.Client` with the name of the authorisation header
and its value. If the API also needs a per-chat header, pass its name and
value as `header_chat` and `token_chat`; the second header is sent only when
both are given. `api_base` defaults to
`https://dev.whatcrm.net/instances/%s`, where `%s` is replaced by the chat
key of the instance. A `requests.Session` may be passed as `session`.

The client is a context manager; leaving the `with` block closes its session.

```python
from whatcrm.client import Client
from whatcrm.models import Dialog, MessageInput, Reaction

chat_key = "my-chat-key"

with Client(
    redirect_uri="",
    header="X-Api-Key",
    token="token",
    header_chat="X-Chat-Token",
    token_chat="token",
) as client:
    # Connections
    state = client.get_connection_status(chat_key)      # str
    instances = client.get_instances(chat_key)          # list[Instance]
    instance = client.get_instance(chat_key, "other-chat-key")

    # Dialogs
    dialogs = client.get_dialogs(chat_key)              # list[Dialog]
    info = client.get_dialog_info(chat_key, Dialog(chat_id="dialog-id"))
    client.read_dialog(chat_key, "dialog-id")           # Response
    client.pin_dialog(chat_key, "dialog-id")            # bool
    client.unpin_dialog(chat_key, "dialog-id")          # bool
    client.delete_dialog(chat_key, Dialog(chat_id="dialog-id"))

    # Messages
    messages = client.get_messages_from_dialog(chat_key, "dialog-id")
    sent = client.send_message(chat_key, MessageInput(body="Hello", chat_id="dialog-id"))
    print(sent.data.id)
    client.send_file(chat_key, MessageInput(chat_id="dialog-id", file_url="https://example.com/a.pdf"))
    client.add_reaction_to_message(
        chat_key,
        Reaction(chat_id="dialog-id", message_id="message-id", reaction="❤"),
    )

    # Contacts
    user = client.get_contact_info(chat_key, "user-id")  # User
```

`get_instance` raises `WhatcrmError("connection is not found")` when no
connection has the given chat key. `send_file` posts to the same endpoint as
`send_message`. In `get_messages_from_dialog`, `null` entries of the answer
stay `None` in the returned list.

### Models

`whatcrm.models` holds dataclasses for the records of the API: `Response`,
`Status`, `Instance`, `User`, `Reaction`, `Button`, `Message`,
`MessageInput`, `MessageResponse` and `Dialog`. Each has `from_dict` for
decoded JSON, and the ones sent to the server have `to_dict`. Timestamps are
read into timezone-aware `datetime` objects; a missing value or the zero time
`0001-01-01T00:00:00Z` becomes `None`, and is written back as that zero time.

### Errors

All errors derive from `whatcrm.errors.WhatcrmError`. A response outside the
2xx range raises `whatcrm.errors.APIError`, which carries `status_code` and
the response `body`; its message is the body, or the status when the body is
empty. Network failures, answers that are not JSON and answers of the wrong
shape raise `WhatcrmError`.

## Command line

The package installs a `whatcrm` command that sends a message, adds a
reaction or deletes a dialog. Global options go before the command:

```
whatcrm --header X-Api-Key --token token --chat-key my-chat-key \
    send --chat-id dialog-id --body "Hello"
whatcrm --chat-key my-chat-key reaction --chat-id dialog-id --message-id message-id
whatcrm --chat-key my-chat-key delete-dialog --chat-id dialog-id
```

Global options: `--api-base`, `--header`, `--token`, `--header-chat`,
`--chat-token`, `--chat-key`. `reaction` defaults to `❤`. `send` prints the
returned message as JSON; `reaction` and `delete-dialog` print `True` or
`False`. On an error the command prints `error: ...` to standard error and
exits with status 1. See all options with:

```
whatcrm --help
```

## What it does not do

The client only makes requests. It does not receive webhooks, retry failed
requests or store anything locally, and the command line covers only the
three operations above.