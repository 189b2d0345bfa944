"""Chat service data model: users, topics and events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Gender(IntEnum):
    UNSPECIFIED = 0
    FEMALE = 1
    MALE = 2


@dataclass(frozen=True)
class UserId:
    value: int

    def __repr__(self) -> str:
        return f"UserId({self.value})"


@dataclass(frozen=True)
class TopicId:
    value: int

    def __repr__(self) -> str:
        return f"TopicId({self.value})"


@dataclass
class User:
    id: UserId
    name: str
    gender: Gender


@dataclass
class Topic:
    id: TopicId
    name: str
    owner: UserId


@dataclass(frozen=True)
class Join:
    user: UserId
    topic: TopicId


@dataclass(frozen=True)
class Leave:
    user: UserId
    topic: TopicId


@dataclass(frozen=True)
class Message:
    user: UserId
    topic: TopicId
    text: str


def describe_event(ev) -> list[str]:
    """Return the lines that processing ``ev`` prints."""
    match ev:
        case Join(user=uid):
            lines = [f"user: {uid!r} joined"]
        case Leave(user=uid, topic=tid):
            lines = [f"user: {uid!r}, left: {tid!r}"]
        case Message(text=msg):
            lines = [f"broadcast: {msg}"]
        case _:
            raise TypeError(f"not an event: {ev!r}")
    if isinstance(ev, Message):
        lines.append(f"broadcast: {ev.text}")
    return lines


def process_event(ev) -> None:
    for line in describe_event(ev):
        print(line)


def main(argv=None) -> int:
    alice = User(UserId(1), "Alice", Gender.FEMALE)
    bob = User(UserId(2), "Bob", Gender.MALE)
    topic = Topic(TopicId(1), "rust", UserId(1))
    events = [
        Join(alice.id, topic.id),
        Join(bob.id, topic.id),
        Message(alice.id, topic.id, "Hello world!"),
    ]
    print("event1: {!r}, event2:{!r}, event3:{!r}".format(*events))
    for ev in events:
        process_event(ev)
    return 0