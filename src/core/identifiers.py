"""Travel identifiers: 12 random bytes rendered as 24 hex characters."""

import secrets

IDENTIFIER_LENGTH = 24
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_valid_identifier(value: object) -> bool:
    """Return True when ``value`` is exactly 24 hexadecimal characters."""
    if not isinstance(value, str) or len(value) != IDENTIFIER_LENGTH:
        return False
    return all(ch in _HEX_DIGITS for ch in value)


def new_identifier() -> str:
    return secrets.token_hex(IDENTIFIER_LENGTH // 2)
