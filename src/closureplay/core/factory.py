from typing import Optional

from kivy.config import ConfigParser
from kivy.logger import Logger as logger

from .models import ERROR, Counter


def make_counter(step: int, *, bits: Optional[int] = None, overflow: str = ERROR) -> Counter:
    """
    Return a new counter that adds ``step`` to its own total on every call.

    Each call builds a fresh Counter, so counters from separate calls never
    affect each other.
    """
    counter = Counter(step, bits=bits, overflow=overflow)
    logger.debug("ClosurePlay: Created counter with step %s", step)
    return counter


def counter_from_config(cfg: ConfigParser, step: Optional[int] = None) -> Counter:
    if step is None:
        step = cfg.getint("counter", "default_step")
    bits = cfg.getint("counter", "bits") or None
    overflow = cfg.get("counter", "overflow").strip().lower()
    return make_counter(step, bits=bits, overflow=overflow)
