from typing import Any, Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def greater_than(threshold: int) -> Callable[[int], bool]:
    """Predicate closure capturing ``threshold``."""

    def predicate(n: int) -> bool:
        return n > threshold

    return predicate


def apply_each(transform: Callable[[T], R], items: Iterable[T]) -> List[R]:
    return [transform(item) for item in items]


class CompletionHandlers:
    """
    Holds closures that outlive the call which handed them over.

    Handlers are kept until ``run_all`` fires them in insertion order.
    """

    def __init__(self):
        self._handlers: List[Callable[[], Any]] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def add(self, handler: Callable[[], Any]) -> None:
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers.append(handler)

    def run_all(self) -> List[Any]:
        handlers, self._handlers = self._handlers, []
        return [handler() for handler in handlers]
