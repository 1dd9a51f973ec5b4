import copy
from dataclasses import dataclass

from mcoptions.payoff import PayOff, PayOffCall, PayOffDoubleDigital, PayOffPut
from mcoptions.vanilla import VanillaOption


@dataclass
class _MutableCall(PayOff):
    strike: float

    def __call__(self, spot):
        return max(spot - self.strike, 0.0)


def test_option_payoff_delegates_to_call():
    option = VanillaOption(PayOffCall(100.0), 1.0)
    assert option.option_payoff(110.0) == 10.0
    assert option.option_payoff(90.0) == 0.0


def test_option_payoff_delegates_to_put():
    option = VanillaOption(PayOffPut(100.0), 0.5)
    assert option.option_payoff(90.0) == 10.0
    assert option.option_payoff(110.0) == 0.0


def test_expiry_is_kept():
    option = VanillaOption(PayOffCall(100.0), 2.5)
    assert option.expiry == 2.5


def test_double_digital_payoff():
    option = VanillaOption(PayOffDoubleDigital(90.0, 110.0), 1.0)
    assert option.option_payoff(100.0) == 1.0
    assert option.option_payoff(90.0) == 0.0
    assert option.option_payoff(120.0) == 0.0


def test_option_owns_its_payoff():
    payoff = _MutableCall(100.0)
    option = VanillaOption(payoff, 1.0)
    payoff.strike = 50.0
    assert option.option_payoff(110.0) == 10.0
    assert option.payoff is not payoff


def test_copy_is_deep():
    option = VanillaOption(_MutableCall(100.0), 1.0)
    duplicate = copy.copy(option)
    assert duplicate.payoff is not option.payoff
    assert duplicate.expiry == option.expiry
    option.payoff.strike = 50.0
    assert duplicate.option_payoff(110.0) == 10.0
    assert option.option_payoff(110.0) == 60.0


def test_copy_gives_same_payoffs():
    option = VanillaOption(PayOffPut(100.0), 3.0)
    duplicate = copy.deepcopy(option)
    for spot in (50.0, 100.0, 150.0):
        assert duplicate.option_payoff(spot) == option.option_payoff(spot)
    assert duplicate.payoff == option.payoff


def test_rebinding_replaces_option():
    call_option = VanillaOption(PayOffCall(100.0), 1.0)
    put_option = VanillaOption(PayOffPut(100.0), 1.0)
    call_option = copy.copy(put_option)
    assert call_option.option_payoff(80.0) == 20.0