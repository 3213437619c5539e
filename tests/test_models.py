from datetime import datetime, timedelta, timezone

import pytest

from whatcrm.models import (
    Button,
    Dialog,
    Instance,
    Message,
    MessageInput,
    MessageResponse,
    Reaction,
    Response,
    Status,
    User,
)


def _message():
    return Message(
        id="m1",
        content="hello",
        type="text",
        file_url="https://files.example.com/a.png",
        dialog_id="d1",
        sender_id="s1",
        created_at=datetime(2024, 1, 2, 3, 4, 5, 500000, tzinfo=timezone.utc),
        is_edited=True,
        edited_at=datetime(2024, 1, 2, 4, 0, tzinfo=timezone(timedelta(hours=3))),
        editable=True,
        status="sent",
        reactions=[Reaction(chat_id="c1", message_id="m1", reaction="❤")],
        quoted_message_id="q1",
        timeout=30,
        buttons=[Button(id=1, body="Yes")],
    )


def test_response_from_dict():
    resp = Response.from_dict({"success": True, "data": {"x": 1}})
    assert resp.success is True
    assert resp.data == {"x": 1}


def test_response_defaults_when_missing():
    assert Response.from_dict({}) == Response()


def test_status_from_dict():
    assert Status.from_dict({"state": "authorized"}).state == "authorized"


def test_instance_from_dict_reads_json_keys():
    inst = Instance.from_dict(
        {
            "id": 7,
            "chat_key": "ck",
            "pipelineId": 3,
            "stageId": 4,
            "instanceId": "i-1",
            "responsibleId": [1, 2],
            "createNewIfClose": True,
            "is_group": True,
        }
    )
    assert inst.id == 7
    assert inst.chat_key == "ck"
    assert inst.pipeline_id == 3
    assert inst.stage_id == 4
    assert inst.instance_id == "i-1"
    assert inst.responsible_id == [1, 2]
    assert inst.create_new_if_close is True
    assert inst.is_group is True


def test_instance_untagged_fields_match_case_insensitively():
    inst = Instance.from_dict({"wid": "w1", "languagecode": "en", "PUSHNAME": "Bob"})
    assert (inst.wid, inst.language_code, inst.pushname) == ("w1", "en", "Bob")


def test_instance_null_values_become_zero():
    inst = Instance.from_dict({"phone": None, "date_add": None})
    assert inst.phone == ""
    assert inst.date_add == 0


def test_user_round_trip():
    user = User(id="u1", chat_id="c", domain="d", name="Ann", role="r", status="s",
                email="ann@example.com")
    assert User.from_dict(user.to_dict()) == user


def test_reaction_and_button_round_trip():
    reaction = Reaction(chat_id="c", message_id="m", reaction="👍")
    button = Button(id=5, body="OK")
    assert Reaction.from_dict(reaction.to_dict()) == reaction
    assert Button.from_dict(button.to_dict()) == button


def test_message_round_trip():
    msg = _message()
    assert Message.from_dict(msg.to_dict()) == msg


def test_message_wire_keys():
    data = _message().to_dict()
    assert data["timestamp"] == "2024-01-02T03:04:05.5Z"
    assert data["edited_at"] == "2024-01-02T04:00:00+03:00"
    assert data["quotedMsgId"] == "q1"
    assert data["deleted_for"] == ""


def test_message_omits_empty_optional_fields():
    data = Message(content="x").to_dict()
    assert "id" not in data
    assert "timeout" not in data
    assert "buttons" not in data
    assert data["deleted_at"] == "0001-01-01T00:00:00Z"


def test_zero_time_parses_as_none():
    msg = Message.from_dict({"timestamp": "0001-01-01T00:00:00Z", "edited_at": None})
    assert msg.created_at is None
    assert msg.edited_at is None


def test_nanosecond_timestamp_is_truncated():
    msg = Message.from_dict({"timestamp": "2023-05-06T07:08:09.123456789Z"})
    assert msg.created_at == datetime(2023, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)


def test_invalid_timestamp_raises():
    with pytest.raises(ValueError):
        Message.from_dict({"timestamp": "yesterday"})


def test_timestamp_without_offset_raises():
    with pytest.raises(ValueError):
        Message.from_dict({"timestamp": "2023-05-06T07:08:09"})


def test_message_input_wire_keys():
    data = MessageInput(body="hi", chat_id="c1", quoted_message_id="q", file_url="f").to_dict()
    assert data == {"body": "hi", "chatId": "c1", "quotedMsgId": "q", "file_url": "f"}


def test_message_response_reads_message_key():
    resp = MessageResponse.from_dict({"message": {"id": "m9", "content": "ok"}})
    assert resp.data.id == "m9"
    assert resp.data.content == "ok"


def test_message_response_without_message():
    assert MessageResponse.from_dict({}).data == Message()


def test_dialog_round_trip():
    dialog = Dialog(
        id="d1",
        chat_id="c1",
        guest=User(id="g", name="Guest"),
        managers=[User(id="m", name="Manager")],
        type="whatsapp",
        created_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
        last_active_time=datetime(2024, 3, 2, 10, 0, tzinfo=timezone.utc),
        status="open",
        last_message=_message(),
        is_pinned=True,
        version="2",
    )
    assert Dialog.from_dict(dialog.to_dict()) == dialog


def test_dialog_omits_empty_id_and_managers_but_keeps_guest():
    data = Dialog(chat_id="c1").to_dict()
    assert "id" not in data
    assert "managers" not in data
    assert data["guest"] == User().to_dict()
    assert data["chat_id"] == "c1"


def test_dialog_skips_null_managers():
    dialog = Dialog.from_dict({"managers": [None, {"id": "m1"}]})
    assert dialog.managers == [User(id="m1")]