"""Swaps session state reducer and action creators."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from swaps.logging import log
from swaps.models.chain import ChainId
from swaps.models.state import SwapsState, make_initial_state

# * Constants
SWAPS_SET_LIVENESS = "SWAPS_SET_LIVENESS"
SWAPS_SET_HAS_ONBOARDED = "SWAPS_SET_HAS_ONBOARDED"


class Action(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    payload: Any = None


class LivenessPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    live: bool
    chain_id: ChainId


# * Action creators


def set_swaps_liveness(live: bool, chain_id: ChainId) -> Action:
    return Action(type=SWAPS_SET_LIVENESS, payload=LivenessPayload(live=live, chain_id=chain_id))


def set_swaps_has_onboarded(has_onboarded: Any) -> Action:
    return Action(type=SWAPS_SET_HAS_ONBOARDED, payload=has_onboarded)


# * Reducer


def swaps_reducer(state: Optional[SwapsState], action: Union[Action, Mapping[str, Any]]) -> SwapsState:
    """Advance swaps session state.

    ``action`` may be an ``Action`` or a plain ``{"type": ..., "payload": ...}``
    mapping. Unknown action types return ``state`` itself so memoized
    selectors downstream see an unchanged reference.
    """
    if state is None:
        state = make_initial_state()
    if isinstance(action, Mapping):
        action = Action(type=str(action.get("type", "")), payload=action.get("payload"))

    if action.type == SWAPS_SET_LIVENESS:
        payload = action.payload
        if not isinstance(payload, LivenessPayload):
            payload = LivenessPayload.model_validate(payload)
        log.info("Swaps liveness for chain {} set to {}", payload.chain_id, payload.live)
        return state.with_liveness(payload.chain_id, payload.live)

    if action.type == SWAPS_SET_HAS_ONBOARDED:
        return state.with_onboarded(action.payload)

    return state
