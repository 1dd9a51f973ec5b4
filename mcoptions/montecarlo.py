"""Monte Carlo pricers for options on a log-normal underlying."""

from __future__ import annotations

import math
from typing import Callable, Iterator, Optional

from .gaussian import UniformSource, gaussian_by_box_muller
from .parameters import Parameters
from .payoff import OptionType, PayOff, PayOffCall, PayOffPut
from .statistics import StatisticsMC
from .vanilla import VanillaOption


def _check_paths(number_of_paths: int) -> None:
    if number_of_paths < 1:
        raise ValueError("number_of_paths must be at least 1")


def _terminal_spots(
    spot: float,
    drift_integral: float,
    variance: float,
    number_of_paths: int,
    rng: Optional[UniformSource],
) -> Iterator[float]:
    """Yield simulated spots at expiry under the risk-neutral measure."""
    root_variance = math.sqrt(variance)
    moved_spot = spot * math.exp(drift_integral - 0.5 * variance)
    for _ in range(number_of_paths):
        yield moved_spot * math.exp(root_variance * gaussian_by_box_muller(rng))


def _discounted_mean(
    payoff: Callable[[float], float],
    spot: float,
    drift_integral: float,
    variance: float,
    number_of_paths: int,
    rng: Optional[UniformSource],
) -> float:
    _check_paths(number_of_paths)
    running_sum = 0.0
    for this_spot in _terminal_spots(spot, drift_integral, variance, number_of_paths, rng):
        running_sum += payoff(this_spot)
    return running_sum / number_of_paths * math.exp(-drift_integral)


def simple_monte_carlo1(
    expiry: float,
    strike: float,
    spot: float,
    vol: float,
    r: float,
    number_of_paths: int,
    option_type: OptionType = OptionType.CALL,
    rng: Optional[UniformSource] = None,
) -> float:
    """Price a vanilla call or put with constant volatility and rate."""
    if option_type is OptionType.CALL:
        payoff: PayOff = PayOffCall(strike)
    elif option_type is OptionType.PUT:
        payoff = PayOffPut(strike)
    else:
        raise ValueError(f"unknown option type: {option_type!r}")
    return simple_monte_carlo2(payoff, expiry, spot, vol, r, number_of_paths, rng)


def simple_monte_carlo2(
    payoff: Callable[[float], float],
    expiry: float,
    spot: float,
    vol: float,
    r: float,
    number_of_paths: int,
    rng: Optional[UniformSource] = None,
) -> float:
    """Price any pay-off at ``expiry`` with constant volatility and rate."""
    return _discounted_mean(
        payoff, spot, r * expiry, vol * vol * expiry, number_of_paths, rng
    )


def simple_monte_carlo3(
    option: VanillaOption,
    spot: float,
    vol: float,
    r: float,
    number_of_paths: int,
    rng: Optional[UniformSource] = None,
) -> float:
    """Price a vanilla option with constant volatility and rate."""
    expiry = option.expiry
    return _discounted_mean(
        option.option_payoff, spot, r * expiry, vol * vol * expiry, number_of_paths, rng
    )


def simple_monte_carlo4(
    option: VanillaOption,
    spot: float,
    vol: Parameters,
    r: Parameters,
    number_of_paths: int,
    rng: Optional[UniformSource] = None,
) -> float:
    """Price a vanilla option with time-dependent volatility and rate."""
    expiry = option.expiry
    return _discounted_mean(
        option.option_payoff,
        spot,
        r.integral(0.0, expiry),
        vol.integral_square(0.0, expiry),
        number_of_paths,
        rng,
    )


def simple_monte_carlo5(
    option: VanillaOption,
    spot: float,
    vol: Parameters,
    r: Parameters,
    number_of_paths: int,
    gatherer: StatisticsMC,
    rng: Optional[UniformSource] = None,
) -> None:
    """Simulate a vanilla option, feeding each discounted pay-off to ``gatherer``."""
    _check_paths(number_of_paths)
    expiry = option.expiry
    drift_integral = r.integral(0.0, expiry)
    variance = vol.integral_square(0.0, expiry)
    discounting = math.exp(-drift_integral)
    for this_spot in _terminal_spots(spot, drift_integral, variance, number_of_paths, rng):
        gatherer.dump_one_result(option.option_payoff(this_spot) * discounting)