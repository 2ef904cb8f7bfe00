from typing import Dict

from .factory import make_counter
from .models import Counter


class CounterService:
    def __init__(self):
        self.counters: Dict[str, Counter] = {}

    def create(self, name: str, step: int) -> Counter:
        if name in self.counters:
            raise ValueError(f"Counter already registered: {name}")
        counter = make_counter(step)
        self.counters[name] = counter
        return counter

    def alias(self, name: str, new_name: str) -> Counter:
        """Register the existing counter ``name`` under ``new_name`` as well."""
        if new_name in self.counters:
            raise ValueError(f"Counter already registered: {new_name}")
        counter = self.counters[name]
        self.counters[new_name] = counter
        return counter

    def increment_and_get(self, name: str) -> int:
        return self.counters[name]()

    def totals(self) -> Dict[str, int]:
        return {name: counter.total for name, counter in self.counters.items()}
