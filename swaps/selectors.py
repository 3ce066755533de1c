"""
Swaps selectors.

Input accessors read narrow slices of the root state snapshot; the
projections built on top of them are memoized with :mod:`swaps.memoize` and
never raise for missing optional slices, they fall back to empty lists,
empty dicts or ``False`` so transient loading states render as empty views.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from functools import cmp_to_key, partial
from typing import Any, Dict, List, Mapping, Optional, Sequence

from swaps.contract_metadata import ContractMetadataCatalog, get_contract_metadata
from swaps.memoize import Selector, create_selector
from swaps.models.chain import ChainId, is_mainnet_by_chain_id
from swaps.models.state import SwapsState
from swaps.models.token import Balance, Token, TopAsset
from swaps.settings.config import settings
from swaps.utils.address import to_lower_case_compare

# * Input accessors


def _background_state(state: Mapping[str, Any]) -> Mapping[str, Any]:
    return state["engine"]["background_state"]


def chain_id_selector(state: Mapping[str, Any]) -> ChainId:
    return _background_state(state)["network_controller"]["provider"]["chain_id"]


def swaps_state_selector(state: Mapping[str, Any]) -> SwapsState:
    return state["swaps"]


def swaps_controller_tokens(state: Mapping[str, Any]) -> Optional[Sequence[Token]]:
    return _background_state(state)["swaps_controller"].get("tokens")


def top_assets_selector(state: Mapping[str, Any]) -> Optional[Sequence[TopAsset]]:
    return _background_state(state)["swaps_controller"].get("top_assets")


def balances_selector(state: Mapping[str, Any]) -> Optional[Mapping[str, Balance]]:
    return _background_state(state)["token_balances_controller"].get("contract_balances")


# * Enrichment


def add_metadata(
    chain_id: ChainId,
    tokens: Sequence[Token],
    catalog: Optional[ContractMetadataCatalog] = None,
) -> Sequence[Token]:
    """Overwrite token names from the contract metadata catalogue on mainnet.

    Off mainnet the input sequence is returned as is.
    """
    if not is_mainnet_by_chain_id(chain_id):
        return tokens
    if catalog is None:
        catalog = get_contract_metadata()

    enriched = []
    for token in tokens:
        metadata = catalog.lookup(token.address)
        enriched.append(token.with_name(metadata.name) if metadata else token)
    return enriched


# * Balances


def has_positive_balance(balance: Any) -> bool:
    """True for plain numbers above zero and big-number objects whose ``is_zero()`` is False."""
    if balance is None or isinstance(balance, bool):
        return False
    if isinstance(balance, (numbers.Real, Decimal)):
        return balance > 0
    is_zero = getattr(balance, "is_zero", None)
    if callable(is_zero):
        return not is_zero()
    return False


def _lte(a: Any, b: Any) -> bool:
    lte = getattr(a, "lte", None)
    if callable(lte):
        return bool(lte(b))
    return a <= b


def _compare_descending(a: Any, b: Any) -> int:
    # Balances of unlike kinds (an int beside a big number) compare as equal.
    try:
        if _lte(b, a):
            return 0 if _lte(a, b) else -1
        return 1
    except (TypeError, AttributeError):
        return 0


def rank_balance_addresses(balances: Optional[Mapping[str, Balance]]) -> List[str]:
    """Lowercased addresses holding a positive balance, largest balance first.

    Equal balances keep the mapping's iteration order.
    """
    held = [(address, balance) for address, balance in (balances or {}).items() if has_positive_balance(balance)]
    ranked = sorted(held, key=cmp_to_key(lambda a, b: _compare_descending(a[1], b[1])))
    return [address.lower() for address, _ in ranked]


# * Projections


def select_liveness(swaps_state: Optional[SwapsState], chain_id: ChainId) -> bool:
    chain = swaps_state.chain(chain_id) if swaps_state is not None else None
    return bool(chain.is_live) if chain is not None else False


def select_has_onboarded(swaps_state: Optional[SwapsState]) -> bool:
    return bool(swaps_state.has_onboarded) if swaps_state is not None else False


def select_tokens(
    chain_id: ChainId,
    tokens: Optional[Sequence[Token]],
    catalog: Optional[ContractMetadataCatalog] = None,
) -> Sequence[Token]:
    if tokens is None:
        return []
    return add_metadata(chain_id, tokens, catalog)


def select_tokens_object(tokens: Optional[Sequence[Token]]) -> Dict[str, None]:
    """Address-keyed index used only for ``in`` checks against the swaps catalogue."""
    if not tokens:
        return {}
    return {token.address: None for token in tokens}


def select_tokens_with_balance(
    chain_id: ChainId,
    tokens: Optional[Sequence[Token]],
    balances: Optional[Mapping[str, Balance]],
    catalog: Optional[ContractMetadataCatalog] = None,
    max_tokens: int = 5,
) -> Sequence[Token]:
    """Default token list for the selector modal.

    Tokens the account holds come first, in catalogue order, followed by
    catalogue tokens up to ``max_tokens`` entries. Held tokens are never cut.
    """
    if tokens is None:
        return []

    addresses_with_balance = rank_balance_addresses(balances)
    held = set(addresses_with_balance)
    tokens_with_balance: List[Token] = []
    original_tokens: List[Token] = []

    for token in tokens:
        if token.key in held:
            tokens_with_balance.append(token)
        else:
            original_tokens.append(token)

        if (
            len(tokens_with_balance) == len(addresses_with_balance)
            and len(tokens_with_balance) + len(original_tokens) >= max_tokens
        ):
            break

    result = (tokens_with_balance + original_tokens)[: max(len(tokens_with_balance), max_tokens)]
    return add_metadata(chain_id, result, catalog)


def select_top_assets(
    chain_id: ChainId,
    tokens: Optional[Sequence[Token]],
    top_assets: Optional[Sequence[TopAsset]],
    catalog: Optional[ContractMetadataCatalog] = None,
) -> Sequence[Token]:
    if top_assets is None or tokens is None:
        return []

    result = []
    for asset in top_assets:
        match = next((token for token in tokens if to_lower_case_compare(token.address, asset.address)), None)
        if match is not None:
            result.append(match)
    return add_metadata(chain_id, result, catalog)


@dataclass(frozen=True)
class SwapsSelectors:
    liveness: Selector[bool]
    has_onboarded: Selector[bool]
    tokens: Selector[Sequence[Token]]
    tokens_object: Selector[Dict[str, None]]
    tokens_with_balance: Selector[Sequence[Token]]
    top_assets: Selector[Sequence[Token]]

    def all(self) -> List[Selector[Any]]:
        return [
            self.liveness,
            self.has_onboarded,
            self.tokens,
            self.tokens_object,
            self.tokens_with_balance,
            self.top_assets,
        ]

    def clear_caches(self) -> None:
        for selector in self.all():
            selector.clear_cache()
            selector.reset_recomputations()


def build_swaps_selectors(
    catalog: Optional[ContractMetadataCatalog] = None,
    max_tokens: Optional[int] = None,
) -> SwapsSelectors:
    """Build an independent set of memoized swaps projections.

    ``catalog`` defaults to the process-wide contract metadata map, resolved
    lazily on the first mainnet enrichment; ``max_tokens`` defaults to
    ``settings.swaps_max_tokens_with_balance``.
    """
    if max_tokens is None:
        max_tokens = settings.swaps_max_tokens_with_balance

    return SwapsSelectors(
        liveness=create_selector(swaps_state_selector, chain_id_selector, select_liveness, name="swaps_liveness"),
        has_onboarded=create_selector(swaps_state_selector, select_has_onboarded, name="swaps_has_onboarded"),
        tokens=create_selector(
            chain_id_selector,
            swaps_controller_tokens,
            partial(select_tokens, catalog=catalog),
            name="swaps_tokens",
        ),
        tokens_object=create_selector(swaps_controller_tokens, select_tokens_object, name="swaps_tokens_object"),
        tokens_with_balance=create_selector(
            chain_id_selector,
            swaps_controller_tokens,
            balances_selector,
            partial(select_tokens_with_balance, catalog=catalog, max_tokens=max_tokens),
            name="swaps_tokens_with_balance",
        ),
        top_assets=create_selector(
            chain_id_selector,
            swaps_controller_tokens,
            top_assets_selector,
            partial(select_top_assets, catalog=catalog),
            name="swaps_top_assets",
        ),
    )


_default_selectors = build_swaps_selectors()

swaps_liveness_selector = _default_selectors.liveness
swaps_has_onboarded_selector = _default_selectors.has_onboarded
swaps_tokens_selector = _default_selectors.tokens
swaps_tokens_object_selector = _default_selectors.tokens_object
swaps_tokens_with_balance_selector = _default_selectors.tokens_with_balance
swaps_top_assets_selector = _default_selectors.top_assets
