"""
Alea PRNG used for every random draw during dungeon generation.

Based on Johannes Baagøe's Alea algorithm. Seeds may be strings or
integers, and the same seed always yields the same stream, which is what
makes a dungeon reproducible from its seed alone.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


def _make_mash():
    """Return a fresh Mash hash function with its own running state."""
    mash_n = 0xEFC8249D  # 4022871197

    def mash(data):
        nonlocal mash_n
        for char in str(data):
            mash_n = mash_n + ord(char)
            h = 0.02519603282416938 * mash_n
            mash_n = _uint32(h)
            h -= mash_n
            h *= mash_n
            mash_n = _uint32(h)
            h -= mash_n
            mash_n += h * 0x100000000  # 2^32
        return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

    return mash


class AleaPRNG:
    """
    Seedable Alea generator with the integer helpers the generator needs.

    All ranges follow Python conventions: ``randrange(a, b)`` is half-open,
    ``randint(a, b)`` is inclusive on both ends.
    """

    def __init__(self, seed):
        """Initialize with seed string or number."""
        self.seed = str(seed)
        self.call_count = 0

        mash = _make_mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        self.s0 -= mash(self.seed)
        if self.s0 < 0:
            self.s0 += 1
        self.s1 -= mash(self.seed)
        if self.s1 < 0:
            self.s1 += 1
        self.s2 -= mash(self.seed)
        if self.s2 < 0:
            self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def randrange(self, start: int, stop: int) -> int:
        """Integer in ``[start, stop)``."""
        if stop <= start:
            raise ValueError(f"empty range for randrange({start}, {stop})")
        return start + int(self.random() * (stop - start))

    def randint(self, low: int, high: int) -> int:
        """Integer in ``[low, high]``."""
        return self.randrange(low, high + 1)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        if probability >= 1:
            return True
        if probability <= 0:
            return False
        return self.random() < probability

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]

    def swap_remove(self, items: list) -> T:
        """Remove and return a random element, moving the last element into its slot."""
        if not items:
            raise IndexError("Cannot pick from an empty list")
        index = self.randrange(0, len(items))
        picked = items[index]
        last = items.pop()
        if index < len(items):
            items[index] = last
        return picked
