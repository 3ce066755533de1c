"""Chain id helpers for swaps."""

from __future__ import annotations

from typing import Union

ChainId = Union[str, int]


def is_mainnet_by_chain_id(chain_id: ChainId | None, mainnet_chain_id: str | None = None) -> bool:
    """Return True when ``chain_id`` is the canonical mainnet.

    Chain ids are compared by their string form so ``1`` and ``"1"`` match.
    """
    if chain_id is None:
        return False
    if mainnet_chain_id is None:
        from swaps.settings.config import settings

        mainnet_chain_id = settings.swaps_mainnet_chain_id
    return str(chain_id).strip() == str(mainnet_chain_id)
