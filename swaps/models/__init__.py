"""
Typed models shared by the swaps selectors and reducer.
"""
from swaps.models.chain import ChainId, is_mainnet_by_chain_id
from swaps.models.state import INITIAL_STATE, ChainSwapsState, SwapsState, make_initial_state
from swaps.models.token import Balance, BigNumberLike, Token, TopAsset

__all__ = [
    "Balance",
    "BigNumberLike",
    "ChainId",
    "ChainSwapsState",
    "INITIAL_STATE",
    "SwapsState",
    "Token",
    "TopAsset",
    "is_mainnet_by_chain_id",
    "make_initial_state",
]
