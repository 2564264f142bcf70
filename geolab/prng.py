"""
Seeded pseudo-random source.

A string seed is hashed with xmur3 into four 32-bit words that drive an
sfc32 stream. Every intermediate value is masked to 32 bits, so a given seed
string produces the same sequence on any platform; floating point only
appears in the final division by 2**32.
"""

from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
TWO_POW_32 = 4294967296.0
DEFAULT_SEED = "seed"


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


def _code_units(text: str) -> List[int]:
    """UTF-16 code units of text (what a browser's charCodeAt would see)."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


def xmur3(text: str) -> int:
    """Hash a string to one 32-bit word."""
    units = _code_units(text)
    h = (1779033703 ^ len(units)) & MASK32
    for cu in units:
        h = _imul(h ^ cu, 3432918353)
        h = ((h << 13) | (h >> 19)) & MASK32
    h = _imul(h ^ (h >> 16), 2246822507)
    h = _imul(h ^ (h >> 13), 3266489909)
    return (h ^ (h >> 16)) & MASK32


class SeededRandom:
    """sfc32 generator seeded from four salted hashes of a string."""

    def __init__(self, seed: Optional[str] = None):
        text = seed or DEFAULT_SEED
        self.seed = text
        self._a = xmur3(text)
        self._b = xmur3(text + "$")
        self._c = xmur3("@" + text)
        self._d = xmur3("#" + text)

    def next(self) -> float:
        """Advance the state; return a float in [0, 1)."""
        a, b, c, d = self._a, self._b, self._c, self._d
        t = (a + b) & MASK32
        a = b ^ (b >> 9)
        b = (c + (c << 3)) & MASK32
        c = ((c << 21) | (c >> 11)) & MASK32
        d = (d + 1) & MASK32
        t = (t + d) & MASK32
        c = (c + t) & MASK32
        self._a, self._b, self._c, self._d = a, b, c, d
        return t / TWO_POW_32

    __call__ = next

    def next_int(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi], both ends inclusive."""
        return int(self.next() * (hi - lo + 1)) + lo

    def uniform(self, lo: float, hi: float) -> float:
        return lo + (hi - lo) * self.next()

    def pick(self, seq: Sequence[T]) -> T:
        return seq[int(self.next() * len(seq))]

    def shuffle(self, seq: Sequence[T]) -> List[T]:
        """Return a new list in random order.

        Each element gets a random key and the list is stably sorted by key.
        This is a key-sort shuffle, not a uniform Fisher-Yates permutation:
        fine for visual variety, not for anything that needs fairness.
        """
        keyed = [(self.next(), v) for v in seq]
        keyed.sort(key=lambda kv: kv[0])
        return [v for _, v in keyed]


def rng_from_seed(seed: Optional[str]) -> SeededRandom:
    """Return a fresh SeededRandom for seed (empty/None -> DEFAULT_SEED)."""
    return SeededRandom(seed)
