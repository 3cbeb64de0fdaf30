"""Client account code rules

Codes look like ``REP-CC-NNN``: the sales rep prefix (2-3 chars), the
ISO 3166-1 alpha-2 country and a 3-digit zero-padded sequence.
"""

import random
import re
from typing import Iterable, Optional

SYSTEM_PREFIX = "SYS"
TEMPORARY_CODE_PREFIX = "TBD-"
SEQUENCE_WIDTH = 3
MAX_SEQUENCE = 10 ** SEQUENCE_WIDTH - 1

_SEQUENCE_PATTERN = re.compile(r"-(\d{3})$")


def format_client_code(rep_prefix: str, country: str, sequence: int) -> str:
    return f"{rep_prefix}-{country}-{sequence:0{SEQUENCE_WIDTH}d}"


def code_scan_pattern(rep_prefix: str, country: str) -> str:
    """LIKE pattern matching every code issued for a prefix/country pair"""
    return f"{rep_prefix}-{country}-%"


def temporary_client_code(country: str) -> str:
    """Placeholder for clients whose permanent code cannot be computed yet"""
    return f"{TEMPORARY_CODE_PREFIX}{country}-TEMP"


def is_temporary_client_code(client_code: str) -> bool:
    return client_code.startswith(TEMPORARY_CODE_PREFIX)


def parse_sequence(client_code: str) -> Optional[int]:
    match = _SEQUENCE_PATTERN.search(client_code)
    if match:
        return int(match.group(1))
    return None


def max_sequence(client_codes: Iterable[str]) -> int:
    """Highest numeric suffix among the codes, 0 when there is none"""
    highest = 0
    for code in client_codes:
        sequence = parse_sequence(code or "")
        if sequence is not None and sequence > highest:
            highest = sequence
    return highest


def random_sequence() -> int:
    return random.randint(1, MAX_SEQUENCE)


def derive_sales_rep_prefix(
    name: Optional[str],
    email: Optional[str],
    fallback: str = SYSTEM_PREFIX,
) -> str:
    """
    Derive a sales rep code prefix

    Initials of the display name (uppercased, max 3). When that yields
    fewer than 2 characters, the first 3 characters of the email local
    part. Otherwise the system fallback.
    """
    if name:
        initials = "".join(word[0] for word in name.split()).upper()[:3]
        if len(initials) >= 2:
            return initials

    if email:
        local_part = email.split("@")[0].upper()[:3]
        return local_part or fallback

    return fallback
