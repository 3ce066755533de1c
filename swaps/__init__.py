"""
Swaps core: memoized token catalogue projections and session state.

Submodules are imported explicitly by callers; importing ``swaps.logging``
configures loguru sinks as a side effect.
"""

__all__ = [
    "contract_metadata",
    "memoize",
    "reducer",
    "selectors",
    "settings",
    "store",
]

__version__ = "0.1.0"
