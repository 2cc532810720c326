"""
Shared field validators for account request schemas.
"""

import re

CAPITAL_LETTER = re.compile(r"[A-Z]")


def require_capital_letter(password: str) -> str:
    if not CAPITAL_LETTER.search(password):
        raise ValueError("Password must contain at least one capital letter.")
    return password
