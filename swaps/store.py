"""Root state snapshot shape read by the swaps selectors."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from swaps.models.chain import ChainId
from swaps.models.state import SwapsState, make_initial_state
from swaps.models.token import Token, TopAsset


def _coerce(items: Optional[Iterable[Any]], model: type) -> Optional[Sequence[Any]]:
    if items is None:
        return None
    if isinstance(items, (list, tuple)) and all(isinstance(item, model) for item in items):
        return items
    return [item if isinstance(item, model) else model.model_validate(item) for item in items]


def make_root_state(
    chain_id: ChainId,
    swaps: Optional[SwapsState] = None,
    tokens: Optional[Iterable[Any]] = None,
    top_assets: Optional[Iterable[Any]] = None,
    contract_balances: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Build a state snapshot; token and top asset dicts are validated into models.

    Lists that already hold models are stored by reference, so snapshots
    built from the same lists share them and memoized selectors stay warm.

    ``None`` slices stay ``None`` so selectors see them as not loaded yet.
    """
    return {
        "swaps": swaps if swaps is not None else make_initial_state(),
        "engine": {
            "background_state": {
                "network_controller": {"provider": {"chain_id": chain_id}},
                "swaps_controller": {
                    "tokens": _coerce(tokens, Token),
                    "top_assets": _coerce(top_assets, TopAsset),
                },
                "token_balances_controller": {"contract_balances": contract_balances},
            }
        },
    }
