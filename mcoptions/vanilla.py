"""Vanilla options: a pay-off together with an expiry."""

from __future__ import annotations

from .payoff import PayOff


class VanillaOption:
    """An option paying ``payoff(spot)`` at time ``expiry``.

    The option keeps its own copy of the pay-off.  Later changes to the
    object that was passed in therefore do not reach the option, and copies
    of the option never share a pay-off.
    """

    __slots__ = ("_payoff", "_expiry")

    def __init__(self, payoff: PayOff, expiry: float) -> None:
        self._payoff = payoff.clone()
        self._expiry = float(expiry)

    @property
    def expiry(self) -> float:
        """Time to expiry."""
        return self._expiry

    @property
    def payoff(self) -> PayOff:
        """The pay-off owned by this option."""
        return self._payoff

    def option_payoff(self, spot: float) -> float:
        """Pay-off of the option for the given spot at expiry."""
        return self._payoff(spot)

    def __copy__(self) -> "VanillaOption":
        return VanillaOption(self._payoff, self._expiry)

    def __deepcopy__(self, memo: dict) -> "VanillaOption":
        return self.__copy__()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(payoff={self._payoff!r}, expiry={self._expiry!r})"