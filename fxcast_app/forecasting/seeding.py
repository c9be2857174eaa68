"""Stable per-currency seeds for the history random walk."""

import hashlib


def currency_seed(currency: str) -> int:
    """
    Derive a stable 64-bit seed from a currency code.

    The seed is the first 8 bytes (big-endian) of the SHA-256 digest of the
    UTF-8 encoded code. Built-in ``hash()`` is salted per process and must
    not be used here: the same currency has to produce the same synthetic
    history in every process.

    Args:
        currency: Currency code, e.g. "EUR"

    Returns:
        Unsigned 64-bit integer seed
    """
    digest = hashlib.sha256(currency.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")
