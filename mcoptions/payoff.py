"""Option pay-off functions."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class OptionType(Enum):
    """Kinds of pay-off handled by :class:`PayOffByType`."""

    CALL = "call"
    PUT = "put"
    CALL_DIGITAL = "call_digital"
    PUT_DIGITAL = "put_digital"


class PayOff(ABC):
    """A pay-off: maps the spot at expiry to a cash amount."""

    @abstractmethod
    def __call__(self, spot: float) -> float:
        """Pay-off for the given spot."""

    def clone(self) -> "PayOff":
        """Return an independent copy of this pay-off."""
        return copy.copy(self)


@dataclass(frozen=True)
class PayOffByType(PayOff):
    """Pay-off chosen by an :class:`OptionType` tag."""

    strike: float
    option_type: OptionType

    def __call__(self, spot: float) -> float:
        if self.option_type is OptionType.CALL:
            return max(spot - self.strike, 0.0)
        if self.option_type is OptionType.PUT:
            return max(self.strike - spot, 0.0)
        if self.option_type is OptionType.CALL_DIGITAL:
            return 1.0 if self.strike >= spot else 0.0
        if self.option_type is OptionType.PUT_DIGITAL:
            return 0.0 if self.strike >= spot else 1.0
        raise ValueError(f"unknown option type: {self.option_type!r}")


@dataclass(frozen=True)
class PayOffCall(PayOff):
    """Vanilla call: max(spot - strike, 0)."""

    strike: float

    def __call__(self, spot: float) -> float:
        return max(spot - self.strike, 0.0)


@dataclass(frozen=True)
class PayOffPut(PayOff):
    """Vanilla put: max(strike - spot, 0)."""

    strike: float

    def __call__(self, spot: float) -> float:
        return max(self.strike - spot, 0.0)


@dataclass(frozen=True)
class PayOffDoubleDigital(PayOff):
    """Pays one when the spot lies strictly between the two levels."""

    lower_level: float
    upper_level: float

    def __call__(self, spot: float) -> float:
        if spot <= self.lower_level or spot >= self.upper_level:
            return 0.0
        return 1.0


@dataclass(frozen=True)
class PayOffCallPower(PayOff):
    """Power call: max(spot ** power - strike, 0)."""

    strike: float
    power: int

    def __call__(self, spot: float) -> float:
        return max(float(spot) ** self.power - self.strike, 0.0)


@dataclass(frozen=True)
class PayOffPutPower(PayOff):
    """Power put: max(strike - spot ** power, 0)."""

    strike: float
    power: int

    def __call__(self, spot: float) -> float:
        return max(self.strike - float(spot) ** self.power, 0.0)