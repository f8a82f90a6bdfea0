import string
from typing import Dict, Iterator, List, NamedTuple, Tuple

from .errors import InvalidKeyword

GRID_SIZE = 5
ALPHABET = string.ascii_lowercase
DEFAULT_MERGE = ("j", "i")


class Position(NamedTuple):
    row: int
    col: int


def check_merge(merge: Tuple[str, str]) -> Tuple[str, str]:
    """Validate a (merged, substitute) letter pair and return it lowercased."""
    try:
        merged, substitute = merge
    except (TypeError, ValueError):
        raise ValueError(f"merge must be a pair of letters, got {merge!r}")
    merged, substitute = str(merged).lower(), str(substitute).lower()
    for letter in (merged, substitute):
        if len(letter) != 1 or letter not in ALPHABET:
            raise ValueError(f"Bad merge letter '{letter}'")
    if merged == substitute:
        raise ValueError("merge letters must differ")
    return merged, substitute


def clean_text(text: str, merge: Tuple[str, str] = DEFAULT_MERGE) -> str:
    """
    Normalise text for the cipher.

    Lowercases, drops everything outside a-z and folds the merged
    letter into its substitute. Cleaning clean text is a no-op.
    """
    merged, substitute = merge
    return "".join(
        substitute if c == merged else c
        for c in text.lower()
        if c in ALPHABET
    )


# ==========================================
#  KEY SQUARE
# ==========================================

class Grid:
    """
    The 5x5 Playfair key square.

    Letters are stored row-major. A Grid never changes after it is built,
    so one instance can be shared freely.
    """

    def __init__(self, letters: str):
        if len(letters) != GRID_SIZE * GRID_SIZE or len(set(letters)) != len(letters):
            raise ValueError(f"A grid needs {GRID_SIZE * GRID_SIZE} distinct letters, got {letters!r}")
        self._letters = letters
        self._positions: Dict[str, Position] = {
            c: Position(*divmod(i, GRID_SIZE)) for i, c in enumerate(letters)
        }

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def rows(self) -> List[str]:
        return [self._letters[r * GRID_SIZE:(r + 1) * GRID_SIZE] for r in range(GRID_SIZE)]

    def position(self, letter: str) -> Position:
        return self._positions[letter]

    def at(self, row: int, col: int) -> str:
        return self._letters[(row % GRID_SIZE) * GRID_SIZE + col % GRID_SIZE]

    def render(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows)

    def __contains__(self, letter) -> bool:
        return letter in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._letters)

    def __len__(self) -> int:
        return len(self._letters)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(self._letters)

    def __repr__(self) -> str:
        return f"Grid({self._letters!r})"

    def __str__(self) -> str:
        return self.render()


def build_grid(keyword: str, merge: Tuple[str, str] = DEFAULT_MERGE) -> Grid:
    """
    Build the key square for a keyword.

    Keyword letters come first in order of first appearance, then the
    rest of the alphabet (merged letter excluded) in natural order.
    """
    merged, substitute = check_merge(merge)
    cleaned = clean_text(keyword, (merged, substitute))
    if not cleaned:
        raise InvalidKeyword(f"Keyword {keyword!r} has no usable letters.")

    remaining = "".join(c for c in ALPHABET if c != merged)
    return Grid("".join(dict.fromkeys(cleaned + remaining)))
