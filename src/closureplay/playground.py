from typing import List

from kivy.config import ConfigParser

from .core.closures import CompletionHandlers, apply_each, greater_than
from .core.factory import counter_from_config
from .core.services import CounterService


def run(cfg: ConfigParser) -> List[str]:
    """
    Walk through the closure examples and return the lines they print.
    """
    lines: List[str] = []

    # a closure stored in a variable
    over_three = greater_than(3)
    lines.append(f"greater_than(3)(4) -> {over_three(4)}")
    lines.append(f"greater_than(3) over [1..5] -> {apply_each(over_three, range(1, 6))}")

    # independent counters
    service = CounterService()
    service.create("c1", 10)
    service.create("c2", 7)
    for name in ("c1", "c1", "c2", "c2", "c1"):
        lines.append(f"{name}() -> {service.increment_and_get(name)}")

    # c3 is the same counter as c1, not a copy
    service.alias("c1", "c3")
    for name in ("c3", "c1"):
        lines.append(f"{name}() -> {service.increment_and_get(name)}")

    # counter built from configuration
    default = counter_from_config(cfg)
    lines.append(f"default counter -> {[default() for _ in range(3)]}")

    # escaping closures run after the call that registered them returned
    handlers = CompletionHandlers()
    captured = service.counters["c2"]
    handlers.add(captured)
    handlers.add(lambda: captured.total * 2)
    lines.append(f"completion handlers -> {handlers.run_all()}")

    lines.append(f"totals -> {service.totals()}")
    return lines
