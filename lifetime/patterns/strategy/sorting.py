"""Interchangeable sorting strategies for a list of names."""

from abc import ABC, abstractmethod
from typing import Dict, List, Type


class SortStrategy(ABC):
    """Sorts a list in place."""

    label = ""

    @abstractmethod
    def sort(self, items: List[str]):
        pass


class QuickSort(SortStrategy):
    label = "Quick"

    def sort(self, items: List[str]):
        self._quick_sort(items, 0, len(items) - 1)

    def _quick_sort(self, items: List[str], low: int, high: int):
        while low < high:
            pivot = self._partition(items, low, high)
            # Recurse into the smaller half to bound the stack depth
            if pivot - low < high - pivot:
                self._quick_sort(items, low, pivot - 1)
                low = pivot + 1
            else:
                self._quick_sort(items, pivot + 1, high)
                high = pivot - 1

    @staticmethod
    def _partition(items: List[str], low: int, high: int) -> int:
        middle = (low + high) // 2
        items[middle], items[high] = items[high], items[middle]
        pivot = items[high]
        i = low
        for j in range(low, high):
            if items[j] < pivot:
                items[i], items[j] = items[j], items[i]
                i += 1
        items[i], items[high] = items[high], items[i]
        return i


class ShellSort(SortStrategy):
    label = "Shell"

    def sort(self, items: List[str]):
        gap = len(items) // 2
        while gap > 0:
            for i in range(gap, len(items)):
                value = items[i]
                j = i
                while j >= gap and items[j - gap] > value:
                    items[j] = items[j - gap]
                    j -= gap
                items[j] = value
            gap //= 2


class MergeSort(SortStrategy):
    label = "Merge"

    def sort(self, items: List[str]):
        items[:] = self._merge_sort(items)

    def _merge_sort(self, items: List[str]) -> List[str]:
        if len(items) <= 1:
            return list(items)

        middle = len(items) // 2
        left = self._merge_sort(items[:middle])
        right = self._merge_sort(items[middle:])

        merged = []
        i = j = 0
        while i < len(left) and j < len(right):
            # <= keeps the sort stable
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged


STRATEGIES: Dict[str, Type[SortStrategy]] = {
    "quick": QuickSort,
    "shell": ShellSort,
    "merge": MergeSort,
}


def get_strategy(name: str) -> SortStrategy:
    try:
        return STRATEGIES[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown sort strategy: {name}") from None


class SortedList:
    """Context configured with a sort strategy."""

    def __init__(self):
        self._items: List[str] = []
        self._strategy: SortStrategy = None

    def set_sort_strategy(self, strategy: SortStrategy):
        self._strategy = strategy

    def add(self, name: str):
        self._items.append(name)

    @property
    def items(self) -> List[str]:
        return list(self._items)

    def sort(self):
        if self._strategy is None:
            raise RuntimeError("No sort strategy set")

        self._strategy.sort(self._items)
        print(f"{self._strategy.label} sorted list ")

        for name in self._items:
            print(f"\t{name}")
        print()
