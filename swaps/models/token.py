"""Pydantic models for swap catalog entries."""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict


class Token(BaseModel):
    """A swaps catalog token. Fields other than address/name are carried through untouched."""

    model_config = ConfigDict(extra="allow", frozen=True)

    address: str
    name: Optional[str] = None

    @property
    def key(self) -> str:
        return self.address.lower()

    def with_name(self, name: str) -> "Token":
        return self.model_copy(update={"name": name})


class TopAsset(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    address: str


@runtime_checkable
class BigNumberLike(Protocol):
    """Balance values that are not plain Python numbers must quack like this."""

    def is_zero(self) -> bool: ...

    def lte(self, other: Any) -> bool: ...


Balance = Union[numbers.Real, Decimal, BigNumberLike]
