"""Address normalisation helpers."""

from __future__ import annotations

from typing import Optional

from web3 import Web3

from swaps.logging import log


def safe_to_checksum_address(address: Optional[str]) -> Optional[str]:
    """Return the EIP-55 checksum form of ``address`` or None when it is empty or malformed."""
    if not address:
        return None
    try:
        return Web3.to_checksum_address(address)
    except (ValueError, TypeError) as exc:
        log.debug("Cannot checksum address {!r}: {}", address, exc)
        return None


def to_lower_case_compare(a: Optional[str], b: Optional[str]) -> bool:
    return bool(a) and bool(b) and a.lower() == b.lower()
