from typing import Optional

from kivy.logger import Logger as logger

ERROR = "error"
WRAP = "wrap"
OVERFLOW_POLICIES = (ERROR, WRAP)


class Counter:
    """
    Running total that grows by a fixed step each time it is called.

    Instances compare and hash by identity: two names bound to the same
    Counter share one total, two Counters never share anything.

    With ``bits`` left as None the total is a plain Python int and never
    overflows. With a width set, totals are kept in the signed range of that
    width and ``overflow`` picks between raising and two's-complement wrap.
    """

    __slots__ = ("_step", "_total", "_bits", "_overflow")

    def __init__(self, step: int, bits: Optional[int] = None, overflow: str = ERROR):
        if not isinstance(step, int) or isinstance(step, bool):
            raise TypeError(f"step must be an int, got {type(step).__name__}")
        if bits is not None and (isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0):
            raise ValueError(f"bits must be a positive int or None, got {bits!r}")
        if overflow not in OVERFLOW_POLICIES:
            raise ValueError(f"Unknown overflow policy: {overflow!r}")

        self._step = step
        self._total = 0
        self._bits = bits
        self._overflow = overflow

    @property
    def step(self) -> int:
        return self._step

    @property
    def total(self) -> int:
        return self._total

    @property
    def bits(self) -> Optional[int]:
        return self._bits

    @property
    def overflow(self) -> str:
        return self._overflow

    def __call__(self) -> int:
        self._total = self._bound(self._total + self._step)
        return self._total

    def __repr__(self) -> str:
        return f"Counter(step={self._step}, total={self._total})"

    # ---------- Internals ----------

    def _fits(self, value: int) -> bool:
        limit = 1 << (self._bits - 1)
        return -limit <= value < limit

    def _bound(self, value: int) -> int:
        if self._bits is None or self._fits(value):
            return value
        if self._overflow == WRAP:
            mask = (1 << self._bits) - 1
            value &= mask
            if value >= 1 << (self._bits - 1):
                value -= 1 << self._bits
            return value
        logger.warning(
            "ClosurePlay: Counter overflow: %s + %s exceeds %s bits", self._total, self._step, self._bits
        )
        raise OverflowError(f"Counter total {value} does not fit in {self._bits} bits")
