# cell.py
# Packed per-cell state: bit 0 = alive, bits 1-4 = live neighbour count.

ALIVE_BIT = 0x01
COUNT_MASK = 0x1e
COUNT_SHIFT = 1


class CellRangeError(ValueError):
    """Raw value outside the domain of a cell or a neighbour count."""


class NeighbourCount:
    MIN = 0
    MAX = 8

    __slots__ = ("_value",)

    def __init__(self, value: int):
        if not self.MIN <= value <= self.MAX:
            raise CellRangeError(f"{value} out of range for neighbour count")
        self._value = value

    def get(self) -> int:
        return self._value

    def __eq__(self, other):
        if isinstance(other, NeighbourCount):
            return self._value == other._value
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return f"NeighbourCount({self._value})"


class Cell:
    """
    One grid position for the current generation, packed into a 5-bit
    value in [0, 31]. Counts above 8 are rejected on construction.
    """

    MIN = 0
    MAX = 0b00011111

    __slots__ = ("value",)

    def __init__(self, value: int = 0):
        value = int(value)
        if not self.MIN <= value <= self.MAX:
            raise CellRangeError(f"{value} out of range for cell")
        if (value & COUNT_MASK) >> COUNT_SHIFT > NeighbourCount.MAX:
            raise CellRangeError(f"{value} holds a neighbour count above "
                                 f"{NeighbourCount.MAX}")
        self.value = value

    def is_alive(self) -> bool:
        return (self.value & ALIVE_BIT) != 0

    def is_empty(self) -> bool:
        # dead and no neighbours
        return self.value == 0

    def set_alive(self) -> None:
        self.value |= ALIVE_BIT

    def set_dead(self) -> None:
        self.value &= ~ALIVE_BIT

    def neighbours(self) -> NeighbourCount:
        return NeighbourCount((self.value & COUNT_MASK) >> COUNT_SHIFT)

    def try_increment(self) -> bool:
        count = self.neighbours().get()
        if count >= NeighbourCount.MAX:
            return False
        self.value = (self.value & ~COUNT_MASK) | ((count + 1) << COUNT_SHIFT)
        return True

    def try_decrement(self) -> bool:
        count = self.neighbours().get()
        if count <= NeighbourCount.MIN:
            return False
        self.value = (self.value & ~COUNT_MASK) | ((count - 1) << COUNT_SHIFT)
        return True

    def __int__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, Cell):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return (f"Cell(alive={self.is_alive()}, "
                f"neighbours={(self.value & COUNT_MASK) >> COUNT_SHIFT})")
