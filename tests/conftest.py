"""Test configuration and fixtures.

File logging is disabled before any ``swaps`` module is imported so test
runs do not write into the repository's ``logs/`` directory.
"""

import os

os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from swaps.contract_metadata import ContractMetadataCatalog  # noqa: E402
from swaps.models.token import Token  # noqa: E402
from swaps.selectors import build_swaps_selectors  # noqa: E402

MAINNET = "1"
BSC = "56"

DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
UNLISTED = "0x1111111111111111111111111111111111111111"


class FakeBigNumber:
    """Minimal stand-in for an arbitrary precision balance object."""

    def __init__(self, value: int) -> None:
        self.value = value

    def is_zero(self) -> bool:
        return self.value == 0

    def lte(self, other: "FakeBigNumber") -> bool:
        return self.value <= other.value

    def __repr__(self) -> str:
        return f"FakeBigNumber({self.value})"


@pytest.fixture
def big_number():
    return FakeBigNumber


@pytest.fixture
def catalog():
    return ContractMetadataCatalog(
        {
            DAI: {"name": "Dai Stablecoin", "symbol": "DAI", "decimals": 18, "erc20": True},
            USDC: {"name": "USD Coin", "symbol": "USDC", "decimals": 6, "erc20": True},
        }
    )


@pytest.fixture
def selectors(catalog):
    return build_swaps_selectors(catalog=catalog, max_tokens=5)


@pytest.fixture
def letter_tokens():
    """Tokens A..F with short addresses, never present in any metadata catalogue."""
    return [Token(address=f"0x{letter}", name=f"Token {letter.upper()}", symbol=letter.upper()) for letter in "abcdef"]


@pytest.fixture
def mainnet_tokens():
    return [
        Token(address=DAI, name="dai", symbol="DAI", decimals=18),
        Token(address=UNLISTED, name="Unlisted", symbol="UNL", decimals=18),
        Token(address=USDC, name="usdc", symbol="USDC", decimals=6),
    ]
