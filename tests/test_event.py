import pytest

from httpkit.event import (
    Join, Leave, Message, TopicId, UserId, describe_event, main, process_event,
)


def test_join():
    assert describe_event(Join(UserId(1), TopicId(1))) == ["user: UserId(1) joined"]


def test_leave():
    assert describe_event(Leave(UserId(2), TopicId(3))) == [
        "user: UserId(2), left: TopicId(3)"
    ]


def test_message_broadcast_twice():
    lines = describe_event(Message(UserId(1), TopicId(1), "Hello world!"))
    assert lines == ["broadcast: Hello world!"] * 2


def test_not_event():
    with pytest.raises(TypeError):
        describe_event("x")


def test_process_event(capsys):
    process_event(Join(UserId(5), TopicId(1)))
    assert capsys.readouterr().out == "user: UserId(5) joined\n"


def test_main(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("broadcast: Hello world!") == 2