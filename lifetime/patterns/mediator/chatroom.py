"""A chatroom routing messages between participants."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class AbstractChatroom(ABC):
    """Mediator interface."""

    @abstractmethod
    def register(self, participant: "Participant"):
        pass

    @abstractmethod
    def send(self, sender: str, receiver: str, message: str):
        pass


class Chatroom(AbstractChatroom):
    """Participants only talk to each other through the room."""

    def __init__(self):
        self._participants: Dict[str, "Participant"] = {}

    def register(self, participant: "Participant"):
        self._participants[participant.name] = participant
        participant.chatroom = self

    def send(self, sender: str, receiver: str, message: str):
        participant = self._participants.get(receiver)
        if participant is None:
            logger.warning(f"{sender} sent a message to unknown participant {receiver}")
            return
        participant.receive(sender, message)


class Participant:
    """Colleague."""

    def __init__(self, name: str):
        self.name = name
        self.chatroom: Optional[AbstractChatroom] = None

    def send(self, receiver: str, message: str):
        if self.chatroom is None:
            raise RuntimeError(f"{self.name} has not joined a chatroom")
        self.chatroom.send(self.name, receiver, message)

    def receive(self, sender: str, message: str):
        print(f"{sender} to {self.name}: '{message}'")


class Beatle(Participant):
    def receive(self, sender: str, message: str):
        print("To a Beatle: ", end="")
        super().receive(sender, message)


class NonBeatle(Participant):
    def receive(self, sender: str, message: str):
        print("To a non-Beatle: ", end="")
        super().receive(sender, message)
