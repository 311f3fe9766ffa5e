from abc import ABC, abstractmethod
from typing import Any, List


class GraphBase(ABC):
    """
    Abstract base class for everything drawn onto a Canvas surface.
    A graph receives its surface (a pyqtgraph PlotItem) at construction,
    adds its items in `draw()` and takes all of them back in `clear()`.
    """

    def __init__(self, surface: Any) -> None:
        self.surface = surface
        self._items: List[Any] = []

    def _add(self, item: Any) -> Any:
        self.surface.addItem(item)
        self._items.append(item)
        return item

    def _remove(self, item: Any) -> None:
        if item in self._items:
            self._items.remove(item)
        self.surface.removeItem(item)

    def items(self) -> List[Any]:
        return list(self._items)

    @abstractmethod
    def draw(self) -> None:
        ...

    def clear(self) -> None:
        for item in list(self._items):
            self._remove(item)
