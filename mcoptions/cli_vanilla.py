"""Interactive pricers for vanilla options that own their pay-off."""

from __future__ import annotations

import argparse
import copy
import random
import sys
from typing import Callable, Sequence, TextIO

from .cli_basic import InputError, _number_of_paths, _Prompter
from .montecarlo import simple_monte_carlo3, simple_monte_carlo4
from .parameters import ParametersConstant, ParametersPiecewiseConstant
from .payoff import PayOffCall, PayOffDoubleDigital, PayOffPut
from .vanilla import VanillaOption

Pricer = Callable[[VanillaOption], float]

_PIECEWISE_RATES = (0.015, 0.02, 0.025)


def _price_options(
    ask: _Prompter, out: TextIO, expiry: float, strike: float, price: Pricer
) -> None:
    """Price a call, a copy of it, a put and a double digital, printing each."""
    option = VanillaOption(PayOffCall(strike), expiry)
    print(f"the price of the call option is {price(option):g}", file=out)

    second_option = copy.copy(option)
    print(
        f"the price of the (copy-constructed) call option is {price(second_option):g}",
        file=out,
    )

    third_option = VanillaOption(PayOffPut(strike), expiry)
    option = copy.copy(third_option)
    print(f"the price of the put option is {price(option):g}", file=out)

    print("Let's consider now a double-digital option: ", file=out)
    low = ask.ask("Enter Lower Option Level", float)
    up = ask.ask("Enter Upper Option Level", float)
    digital_option = VanillaOption(PayOffDoubleDigital(low, up), expiry)
    print(
        f"the price of the double-digital option is {price(digital_option):g}",
        file=out,
    )


def _run_constant(ask: _Prompter, out: TextIO, rng: random.Random) -> None:
    expiry = ask.ask("Enter expiry", float)
    strike = ask.ask("Enter Strike", float)
    spot = ask.ask("Enter spot", float)
    vol = ask.ask("Enter vol", float)
    r = ask.ask("Enter r", float)
    paths = ask.ask(" Number of paths", _number_of_paths)

    def price(option: VanillaOption) -> float:
        return simple_monte_carlo3(option, spot, vol, r, paths, rng)

    _price_options(ask, out, expiry, strike, price)


def _run_parameters(ask: _Prompter, out: TextIO, rng: random.Random) -> None:
    expiry = ask.ask("Enter expiry", float)
    strike = ask.ask("Enter Strike", float)
    spot = ask.ask("Enter spot", float)
    vol = ParametersConstant(ask.ask("Enter vol", float))
    r = ParametersConstant(ask.ask("Enter r", float))
    paths = ask.ask(" Number of paths", _number_of_paths)

    def price(option: VanillaOption) -> float:
        return simple_monte_carlo4(option, spot, vol, r, paths, rng)

    _price_options(ask, out, expiry, strike, price)


def _run_piecewise(ask: _Prompter, out: TextIO, rng: random.Random) -> None:
    expiry = ask.ask("Enter expiry", float)
    strike = ask.ask("Enter Strike", float)
    spot = ask.ask("Enter spot", float)
    vol = ParametersConstant(ask.ask("Enter vol", float))

    step = expiry / len(_PIECEWISE_RATES)
    r = ParametersPiecewiseConstant(
        (step * number, rate) for number, rate in enumerate(_PIECEWISE_RATES, start=1)
    )
    print("\nthe short-rate is:", file=out)
    print(r, end="", file=out)

    paths = ask.ask(" Number of paths", _number_of_paths)

    def price(option: VanillaOption) -> float:
        return simple_monte_carlo4(option, spot, vol, r, paths, rng)

    _price_options(ask, out, expiry, strike, price)


_COMMANDS = {
    "constant": (_run_constant, "constant volatility and rate given as numbers"),
    "parameters": (_run_parameters, "constant volatility and rate given as parameters"),
    "piecewise": (_run_piecewise, "constant volatility and a piecewise constant rate"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcoptions-vanilla",
        description=(
            "Monte Carlo pricer for calls, puts and double digitals, "
            "reading its parameters from standard input."
        ),
    )
    parser.add_argument("--seed", type=int, default=None, help="seed of the random source")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pricer chosen on the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    run, _ = _COMMANDS[args.command]
    out = sys.stdout
    prompter = _Prompter(sys.stdin, out)
    rng = random.Random(args.seed)
    try:
        run(prompter, out, rng)
    except InputError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())