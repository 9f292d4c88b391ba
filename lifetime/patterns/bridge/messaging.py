"""Messages decoupled from the channel that delivers them."""

from abc import ABC, abstractmethod


class MessageSender(ABC):
    """Implementor: the bridge between messages and delivery channels."""

    channel = ""

    @abstractmethod
    def send_message(self, title: str, body: str, importance: int):
        pass

    def _print(self, title: str, body: str, importance: int):
        print(f"{self.channel}\n\tTitle: {title}\n\tBody: {body}\n\tPriority: {importance}\n")


class EmailSender(MessageSender):
    channel = "Email"

    def send_message(self, title: str, body: str, importance: int):
        self._print(title, body, importance)


class SmsSender(MessageSender):
    channel = "SMS"

    def send_message(self, title: str, body: str, importance: int):
        self._print(title, body, importance)


class WebServiceSender(MessageSender):
    channel = "Web Service"

    def send_message(self, title: str, body: str, importance: int):
        self._print(title, body, importance)


class SystemMessage:
    """Abstraction. Sent by email unless another sender is given."""

    def __init__(self, title: str = "", body: str = "", importance: int = 0,
                 sender: MessageSender = None):
        self.title = title
        self.body = body
        self.importance = importance
        self.sender = sender or EmailSender()

    def send(self):
        self.sender.send_message(self.title, self.body, self.importance)


class UserMessage(SystemMessage):
    """Refined abstraction carrying user comments."""

    def __init__(self, sender: MessageSender, title: str = "", body: str = "",
                 importance: int = 0, user_comments: str = ""):
        super().__init__(title, body, importance, sender)
        self.user_comments = user_comments

    def send(self):
        full_body = f"\n\tBody: {self.body}\n\tComments: {self.user_comments}"
        self.sender.send_message(self.title, full_body, self.importance)
