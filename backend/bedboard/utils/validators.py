"""
Validation helpers.
"""
import re
from typing import Optional

MRN_PATTERN = re.compile(r'^MRN\d{7}$')
GDID_PATTERN = re.compile(r'^\d{3,}$')


def is_valid_mrn(mrn: str) -> bool:
    """
    Checks the medical record number format.

    Args:
        mrn: Value such as "MRN0100001"

    Returns:
        True if it is "MRN" followed by seven digits
    """
    if not mrn:
        return False
    return bool(MRN_PATTERN.match(mrn.strip().upper()))


def is_valid_gdid(gdid: str) -> bool:
    """
    Checks the external patient id format (digits only, at least three).

    Args:
        gdid: Value such as "007"

    Returns:
        True if valid
    """
    if not gdid:
        return False
    return bool(GDID_PATTERN.match(gdid.strip()))


def normalize_search(text: Optional[str]) -> str:
    """
    Normalises free-text search input.

    Args:
        text: Raw input (may be None)

    Returns:
        Trimmed, lower-cased text ("" when blank)
    """
    if not text:
        return ""
    return text.strip().lower()
