"""
Playfair Cipher Engine.

The classical Playfair digraph cipher: a 5x5 key square built from a keyword,
text enciphered two letters at a time.

    >>> encrypt("playfair example", "hide the gold in the tree stump")
    'bmodzbxdnabekudmuixmmouvif'
    >>> decrypt("playfair example", "bmodzbxdnabekudmuixmmouvif")
    'hidethegoldinthetrexestump'

For teaching and puzzles only. Playfair offers no real security.
"""

__version__ = "1.0.0"

from .errors import CipherError, InvalidCipherText, InvalidFiller, InvalidKeyword
from .grid import ALPHABET, DEFAULT_MERGE, GRID_SIZE, Grid, Position, build_grid, clean_text
from .codec import (
    DEFAULT_FILLER,
    PlayfairCipher,
    decrypt,
    encrypt,
    pairs,
    split_digraphs,
    strip_padding,
    substitute,
)

__all__ = [
    "ALPHABET",
    "CipherError",
    "DEFAULT_FILLER",
    "DEFAULT_MERGE",
    "GRID_SIZE",
    "Grid",
    "InvalidCipherText",
    "InvalidFiller",
    "InvalidKeyword",
    "PlayfairCipher",
    "Position",
    "build_grid",
    "clean_text",
    "decrypt",
    "encrypt",
    "pairs",
    "split_digraphs",
    "strip_padding",
    "substitute",
]
