"""Tests for chat domain models."""

from localchat.domain.chat import ChatMessage, Conversation


def test_conversation_start_pins_system_message():
    conversation = Conversation.start("S")

    assert conversation.messages == [ChatMessage.system("S")]


def test_conversation_reset_discards_history():
    conversation = Conversation.start("S")
    conversation.append(ChatMessage.user("hi"))
    conversation.append(ChatMessage.assistant("hello"))

    conversation.reset("S2")

    assert list(conversation) == [ChatMessage.system("S2")]


def test_snapshot_is_independent_copy():
    conversation = Conversation.start("S")
    snapshot = conversation.snapshot()

    conversation.append(ChatMessage.user("later"))

    assert len(snapshot) == 1
    assert len(conversation) == 2


def test_to_dict_wire_shape():
    assert ChatMessage.assistant("a").to_dict() == {"role": "assistant", "content": "a"}
