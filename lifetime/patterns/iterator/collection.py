"""A collection walked by an external iterator."""

from typing import List, Optional


class Item:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Item({self.name!r})"


class Collection:
    """Aggregate that hands out iterators over its items."""

    def __init__(self):
        self._items: List[Item] = []

    def add(self, item: Item):
        self._items.append(item)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def create_iterator(self, step: int = 1) -> "Iterator":
        return Iterator(self, step)

    def __iter__(self):
        return self.create_iterator()


class Iterator:
    """Walks a collection, skipping `step` positions at a time."""

    def __init__(self, collection: Collection, step: int = 1):
        if step < 1:
            raise ValueError("step must be at least 1")
        self._collection = collection
        self._current = 0
        self.step = step
        self._started = False

    def first(self) -> Optional[Item]:
        self._current = 0
        self._started = True
        return self.current_item

    def next(self) -> Optional[Item]:
        self._current += self.step
        return self.current_item

    @property
    def current_item(self) -> Optional[Item]:
        if self.is_done:
            return None
        return self._collection[self._current]

    @property
    def is_done(self) -> bool:
        return self._current >= len(self._collection)

    def __iter__(self):
        return self

    def __next__(self) -> Item:
        item = self.next() if self._started else self.first()
        if item is None:
            raise StopIteration
        return item
