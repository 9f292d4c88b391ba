"""Mediator demo - a chatroom of Beatles and friends."""

from lifetime.core import Demo

from .chatroom import Beatle, Chatroom, NonBeatle


class MediatorDemo(Demo):

    @property
    def name(self) -> str:
        return "mediator"

    @property
    def display_name(self) -> str:
        return "Mediator"

    @property
    def description(self) -> str:
        return (
            "Define an object that encapsulates how a set of objects interact, "
            "keeping them from referring to each other explicitly"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "Mediator": ["AbstractChatroom"],
            "ConcreteMediator": ["Chatroom"],
            "Colleague": ["Participant"],
            "ConcreteColleague": ["Beatle", "NonBeatle"],
        }

    def compute(self):
        chatroom = Chatroom()

        george = Beatle("George")
        paul = Beatle("Paul")
        ringo = Beatle("Ringo")
        john = Beatle("John")
        yoko = NonBeatle("Yoko")

        for member in (george, paul, ringo, john, yoko):
            chatroom.register(member)

        yoko.send("John", "Hi John!")
        paul.send("Ringo", "All you need is love")
        ringo.send("George", "My sweet Lord")
        paul.send("John", "Can't buy me love")
        john.send("Yoko", "My sweet love")
