"""Decorator demo - making library items borrowable."""

from lifetime.core import Demo

from .library import Book, Borrowable, Video


class DecoratorDemo(Demo):
    """'Borrowable' behaviour is added to an existing video at runtime."""

    @property
    def name(self) -> str:
        return "decorator"

    @property
    def display_name(self) -> str:
        return "Decorator"

    @property
    def description(self) -> str:
        return (
            "Attach additional responsibilities to an object dynamically, as a "
            "flexible alternative to subclassing"
        )

    @property
    def category(self) -> str:
        return "structural"

    @property
    def participants(self):
        return {
            "Component": ["LibraryItem"],
            "ConcreteComponent": ["Book", "Video"],
            "Decorator": ["Decorator"],
            "ConcreteDecorator": ["Borrowable"],
        }

    def compute(self):
        book = Book("Worley", "Inside ASP.NET", 10)
        book.display()

        video = Video("Spielberg", "Jaws", 23, 92)
        video.display()

        print("\n► Making video borrowable:")

        borrow_video = Borrowable(video)
        borrow_video.borrow_item("Nikhil")
        borrow_video.borrow_item("Johnny")

        borrow_video.display()
