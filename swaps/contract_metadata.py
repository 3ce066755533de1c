"""Read-only token metadata catalogue keyed by checksummed contract address.

The bundled map covers well-known mainnet ERC-20 contracts and is only
trustworthy for mainnet addresses; callers gate lookups on the chain id.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from swaps.logging import log
from swaps.utils.address import safe_to_checksum_address

DEFAULT_CONTRACT_MAP_PATH = Path(__file__).resolve().parent / "data" / "contract_map.json"


class ContractMetadataError(RuntimeError):
    """Raised when a contract metadata file cannot be loaded."""


class TokenMetadata(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    symbol: Optional[str] = None
    decimals: Optional[int] = None
    logo: Optional[str] = None
    erc20: bool = False


class ContractMetadataCatalog(Mapping[str, TokenMetadata]):
    """Immutable lookup from checksummed address to :class:`TokenMetadata`."""

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        self._entries: Dict[str, TokenMetadata] = {}
        for address, payload in (entries or {}).items():
            checksum = safe_to_checksum_address(address)
            if checksum is None:
                log.warning("Skipping contract metadata entry with invalid address {!r}", address)
                continue
            self._entries[checksum] = (
                payload if isinstance(payload, TokenMetadata) else TokenMetadata.model_validate(payload)
            )

    def __getitem__(self, address: str) -> TokenMetadata:
        return self._entries[address]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, address: Optional[str]) -> Optional[TokenMetadata]:
        """Checksum ``address`` and return its metadata, or None when unknown or malformed."""
        checksum = safe_to_checksum_address(address)
        if checksum is None:
            return None
        return self._entries.get(checksum)

    @classmethod
    def from_file(cls, path: str | Path) -> "ContractMetadataCatalog":
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise ContractMetadataError(f"Failed to read contract metadata from {path}: {exc}") from exc

        if not isinstance(payload, dict):
            raise ContractMetadataError(f"Contract metadata in {path} must be a JSON object")

        try:
            catalog = cls(payload)
        except ValidationError as exc:
            raise ContractMetadataError(f"Invalid contract metadata in {path}: {exc}") from exc

        log.info("Loaded {} contract metadata entries from {}", len(catalog), path)
        return catalog


_default_catalog: Optional[ContractMetadataCatalog] = None


def get_contract_metadata() -> ContractMetadataCatalog:
    """Return the process-wide catalogue, loading it on first use."""
    global _default_catalog
    if _default_catalog is None:
        from swaps.settings.config import settings

        _default_catalog = ContractMetadataCatalog.from_file(
            settings.contract_metadata_path or DEFAULT_CONTRACT_MAP_PATH
        )
    return _default_catalog
