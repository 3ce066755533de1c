"""Immutable swaps session state."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from swaps.models.chain import ChainId


class ChainSwapsState(BaseModel):
    """Per-chain swaps flags. Unknown keys are kept so updates never drop them."""

    model_config = ConfigDict(extra="allow", frozen=True)

    is_live: bool = False


class SwapsState(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_onboarded: bool = False
    chains: Dict[str, ChainSwapsState] = Field(default_factory=dict)

    def chain(self, chain_id: Any) -> Optional[ChainSwapsState]:
        return self.chains.get(str(chain_id))

    def with_liveness(self, chain_id: Any, live: bool) -> "SwapsState":
        """Return a new state with ``is_live`` set for one chain, other fields preserved."""
        key = str(chain_id)
        current = self.chains.get(key)
        updated = current.model_copy(update={"is_live": live}) if current else ChainSwapsState(is_live=live)
        return self.model_copy(update={"chains": {**self.chains, key: updated}})

    def with_onboarded(self, value: Any) -> "SwapsState":
        return self.model_copy(update={"has_onboarded": bool(value)})


@lru_cache(maxsize=None)
def _initial_state_for(mainnet_chain_id: str) -> SwapsState:
    return SwapsState(
        has_onboarded=False,
        chains={mainnet_chain_id: ChainSwapsState(is_live=True)},
    )


def make_initial_state(mainnet_chain_id: Optional[ChainId] = None) -> SwapsState:
    """Fresh session state: not onboarded, swaps live only on the canonical mainnet.

    Defaults to ``settings.swaps_mainnet_chain_id``; the same object is returned
    for the same mainnet id.
    """
    if mainnet_chain_id is None:
        from swaps.settings.config import settings

        mainnet_chain_id = settings.swaps_mainnet_chain_id
    return _initial_state_for(str(mainnet_chain_id).strip())


INITIAL_STATE = make_initial_state()
