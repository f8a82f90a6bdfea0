from typing import List, Tuple

from .errors import InvalidCipherText, InvalidFiller
from .grid import ALPHABET, DEFAULT_MERGE, Grid, build_grid, check_merge, clean_text

DEFAULT_FILLER = "x"

Digraph = Tuple[str, str]


def check_filler(filler: str, merge: Tuple[str, str] = DEFAULT_MERGE) -> str:
    """Return the filler as the grid letter it stands for."""
    if not isinstance(filler, str) or len(filler) != 1 or filler.lower() not in ALPHABET:
        raise InvalidFiller(f"Filler must be a single ASCII letter, got {filler!r}")
    return clean_text(filler, merge)


# ==========================================
#  SEGMENTATION
# ==========================================

def split_digraphs(text: str, filler: str = DEFAULT_FILLER) -> List[Digraph]:
    """
    Cut cleaned plaintext into digraphs for encryption.

    A letter followed by itself, or by nothing, is paired with the filler
    and the repeated letter opens the next digraph. So a doubled letter
    at the very end gives two padded digraphs: "ll" -> [("l", "x"), ("l", "x")].
    """
    digraphs = []
    i = 0
    while i < len(text):
        first = text[i]
        second = text[i + 1] if i + 1 < len(text) else None
        if second is None or second == first:
            digraphs.append((first, filler))
            i += 1
        else:
            digraphs.append((first, second))
            i += 2
    return digraphs


def pairs(text: str) -> List[Digraph]:
    """Cut cleaned ciphertext into consecutive letter pairs."""
    if len(text) % 2:
        raise InvalidCipherText(f"Ciphertext has an odd number of letters ({len(text)}).")
    return [(text[i], text[i + 1]) for i in range(0, len(text), 2)]


def substitute(grid: Grid, digraph: Digraph, shift: int) -> str:
    """
    Apply the Playfair rules to one digraph.

    shift is +1 to encrypt (right / down) and -1 to decrypt (left / up).
    The rectangle rule swaps columns and is its own inverse.
    """
    a, b = digraph
    ra, ca = grid.position(a)
    rb, cb = grid.position(b)

    if ra == rb:
        return grid.at(ra, ca + shift) + grid.at(rb, cb + shift)
    if ca == cb:
        return grid.at(ra + shift, ca) + grid.at(rb + shift, cb)
    return grid.at(ra, cb) + grid.at(rb, ca)


def strip_padding(text: str, filler: str = DEFAULT_FILLER) -> str:
    """
    Best-effort removal of filler letters from decrypted text.

    Drops a filler closing a pair whose first letter repeats right after it,
    and a filler closing the last pair. A real filler letter sitting in one
    of those spots is dropped too; Playfair cannot tell them apart.
    """
    filler = check_filler(filler)
    kept = []
    for i in range(0, len(text), 2):
        first, second = text[i], text[i + 1:i + 2]
        kept.append(first)
        if second == filler:
            following = text[i + 2:i + 3]
            if not following or following == first:
                continue
        kept.append(second)
    return "".join(kept)


# ==========================================
#  CIPHER
# ==========================================

class PlayfairCipher:
    """
    Playfair cipher bound to one keyword.

    The grid is built once here and only read afterwards, so an instance can
    be reused across calls and threads.
    """

    name = "playfair"
    description = "Classical Playfair digraph substitution over a 5x5 keyword square."

    def __init__(self, keyword: str, filler: str = DEFAULT_FILLER,
                 merge: Tuple[str, str] = DEFAULT_MERGE):
        self.merge = check_merge(merge)
        self.grid = build_grid(keyword, self.merge)
        self.filler = check_filler(filler, self.merge)

    def encode(self, text: str) -> str:
        cleaned = clean_text(text, self.merge)
        return "".join(
            substitute(self.grid, digraph, 1)
            for digraph in split_digraphs(cleaned, self.filler)
        )

    def decode(self, text: str) -> str:
        cleaned = clean_text(text, self.merge)
        return "".join(substitute(self.grid, digraph, -1) for digraph in pairs(cleaned))


def encrypt(key: str, text: str, filler: str = DEFAULT_FILLER) -> str:
    """Encrypt text under key, padding with filler."""
    return PlayfairCipher(key, filler).encode(text)


def decrypt(key: str, text: str) -> str:
    """Decrypt text under key. Filler letters are left in place."""
    return PlayfairCipher(key).decode(text)
