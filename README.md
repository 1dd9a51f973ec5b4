# mcoptions

Monte Carlo pricing of European-style options when the underlying asset follows
geometric Brownian motion (the Black-Scholes model). Pure Python, no
dependencies outside the standard library.

## What is in the package

- `mcoptions.gaussian`: standard normal draws, either by the central limit
  theorem (`gaussian_by_summation`, twelve uniforms minus six) or by the polar
  Box-Muller method (`gaussian_by_box_muller`). Each takes an optional source
  with a `random()` method, such as `random.Random`; without one, the
  `random` module's global generator is used.
- `mcoptions.payoff`: the abstract `PayOff` and the pay-offs `PayOffCall`,
  `PayOffPut`, `PayOffDoubleDigital` (pays 1 strictly between the two levels),
  `PayOffCallPower`, `PayOffPutPower` (on `spot ** power`), and `PayOffByType`,
  selected by an `OptionType` of `CALL`, `PUT`, `CALL_DIGITAL` or
  `PUT_DIGITAL`. The digital `PayOffByType` cases pay 1 for a call when
  `strike >= spot`, and 1 for a put otherwise.
- `mcoptions.parameters`: time-dependent model parameters. `Parameters` offers
  `integral`, `integral_square`, `mean` and `root_mean_square` (the latter
  returns the mean of the square, without a square root).
  `ParametersConstant` holds one value; `ParametersPiecewiseConstant` takes
  `(time, value)` pairs and always integrates from zero to its last breakpoint,
  whatever times are passed.
- `mcoptions.vanilla`: `VanillaOption`, pairing a pay-off (copied on
  construction) with an `expiry`; `option_payoff(spot)` evaluates it.
- `mcoptions.statistics`: gatherers. `StatisticsMean` keeps the running mean
  (NaN before any result). `ConvergenceTable` wraps another gatherer and
  records its results, with the path count appended, after every power of two
  paths.
- `mcoptions.montecarlo`: the pricers `simple_monte_carlo1` (call or put by
  `OptionType`), `simple_monte_carlo2` (any pay-off callable),
  `simple_monte_carlo3` (a `VanillaOption`, constant vol and rate),
  `simple_monte_carlo4` (a `VanillaOption` with `Parameters`), and
  `simple_monte_carlo5` (like 4, but feeding each discounted pay-off to a
  gatherer instead of returning a price). All take an optional `rng` and
  raise `ValueError` when fewer than one path is asked for.

## Installation

```
pip install .
```

## Library use

```python
import random

from mcoptions.payoff import PayOffCall
from mcoptions.parameters import ParametersConstant
from mcoptions.vanilla import VanillaOption
from mcoptions.statistics import StatisticsMean, ConvergenceTable
from mcoptions.montecarlo import simple_monte_carlo5

option = VanillaOption(PayOffCall(100.0), 1.0)
table = ConvergenceTable(StatisticsMean())
simple_monte_carlo5(
    option,
    100.0,
    ParametersConstant(0.2),
    ParametersConstant(0.05),
    10_000,
    table,
    random.Random(42),
)
for mean, paths in table.results_so_far():
    print(paths, mean)
```

## Command-line programs

Each program prints a prompt for every value and reads the answers as
whitespace-separated tokens from standard input, so they can be typed one by
one or piped in. Every program takes `--seed N` to make a run repeatable. An
invalid or missing value ends the run with a message on standard error and exit
status 1; a menu choice outside the offered numbers is simply asked for again.

`mcoptions-basic COMMAND` prices with constant volatility and rate:

- `vanilla`: a call or a put;
- `payoff`: a call, put, digital call or digital put;
- `pair`: a call and a put on the same strike;
- `double-digital`: a double-digital option;
- `power`: a call and a put power option.

`mcoptions-vanilla COMMAND` prices a call, a copy of that call, a put, and then
asks for two levels and prices a double digital:

- `constant`: volatility and rate as plain numbers;
- `parameters`: volatility and rate as constant parameters;
- `piecewise`: constant volatility and a short rate of 0.015, 0.02 and 0.025
  on the three thirds of the expiry, printed before pricing.

`mcoptions-stats` prices the same four options as `mcoptions-vanilla` with
constant parameters, and prints for each a convergence table: one row per power
of two paths, holding the running price and the number of paths.

```
echo "1 100 100 0.2 0.05 10000 90 110" | mcoptions-stats --seed 1
```

## What it does not do

Only European pay-offs that depend on the spot at expiry are handled; there are
no path-dependent or early-exercise options, no closed-form prices, and the
only statistic gathered is the mean. Results are printed, not stored.

## Tests

```
pip install .[test]
pytest
```