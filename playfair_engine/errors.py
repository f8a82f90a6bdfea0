class CipherError(ValueError):
    """Base class for every Playfair failure."""


class InvalidKeyword(CipherError):
    """The keyword has no usable letters once cleaned."""


class InvalidCipherText(CipherError):
    """The ciphertext cleans to an odd number of letters."""


class InvalidFiller(CipherError):
    """The filler is not a single ASCII letter."""
