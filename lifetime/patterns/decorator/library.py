"""Library items and the borrowable decorator."""

from abc import ABC, abstractmethod
from typing import List


class LibraryItem(ABC):
    """Component interface."""

    def __init__(self, num_copies: int = 0):
        self._num_copies = num_copies

    @property
    def num_copies(self) -> int:
        return self._num_copies

    @num_copies.setter
    def num_copies(self, value: int):
        self._num_copies = value

    @abstractmethod
    def display(self):
        pass


class Book(LibraryItem):
    def __init__(self, author: str, title: str, num_copies: int):
        super().__init__(num_copies)
        self.author = author
        self.title = title

    def display(self):
        print("\n► Book")
        print(f"\tAuthor: {self.author}")
        print(f"\tTitle: {self.title}")
        print(f"\t# Copies: {self.num_copies}")


class Video(LibraryItem):
    def __init__(self, director: str, title: str, num_copies: int, play_time: int):
        super().__init__(num_copies)
        self.director = director
        self.title = title
        self.play_time = play_time

    def display(self):
        print("\n► Video")
        print(f"\tDirector: {self.director}")
        print(f"\tTitle: {self.title}")
        print(f"\t# Copies: {self.num_copies}")
        print(f"\tPlaytime: {self.play_time}\n")


class Decorator(LibraryItem):
    """Wraps a library item and conforms to its interface."""

    def __init__(self, library_item: LibraryItem):
        self.library_item = library_item

    @property
    def num_copies(self) -> int:
        return self.library_item.num_copies

    @num_copies.setter
    def num_copies(self, value: int):
        self.library_item.num_copies = value

    def display(self):
        self.library_item.display()


class Borrowable(Decorator):
    """Adds lending to any library item."""

    def __init__(self, library_item: LibraryItem):
        super().__init__(library_item)
        self.borrowers: List[str] = []

    def borrow_item(self, name: str):
        self.borrowers.append(name)
        self.num_copies -= 1

    def return_item(self, name: str):
        self.borrowers.remove(name)
        self.num_copies += 1

    def display(self):
        super().display()
        for borrower in self.borrowers:
            print(f"\tBorrower: {borrower}")
