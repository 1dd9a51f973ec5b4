"""Interactive pricer reporting a convergence table for each option."""

from __future__ import annotations

import argparse
import copy
import random
import sys
from typing import List, Sequence, TextIO

from .cli_basic import InputError, _number_of_paths, _Prompter
from .montecarlo import simple_monte_carlo5
from .parameters import Parameters, ParametersConstant
from .payoff import PayOffCall, PayOffDoubleDigital, PayOffPut
from .statistics import ConvergenceTable, StatisticsMean
from .vanilla import VanillaOption


def _format_rows(rows: List[List[float]]) -> str:
    return "".join("".join(f"{value:g} " for value in row) + "\n" for row in rows)


def _convergence(
    option: VanillaOption,
    spot: float,
    vol: Parameters,
    r: Parameters,
    paths: int,
    rng: random.Random,
) -> List[List[float]]:
    """Simulate ``option`` and return the convergence table of its mean price."""
    table = ConvergenceTable(StatisticsMean())
    simple_monte_carlo5(option, spot, vol, r, paths, table, rng)
    return table.results_so_far()


def _run(ask: _Prompter, out: TextIO, rng: random.Random) -> None:
    expiry = ask.ask("Enter expiry", float)
    strike = ask.ask("Enter Strike", float)
    spot = ask.ask("Enter spot", float)
    vol = ParametersConstant(ask.ask("Enter vol", float))
    r = ParametersConstant(ask.ask("Enter r", float))
    paths = ask.ask(" Number of paths", _number_of_paths)

    def report(title: str, option: VanillaOption) -> None:
        print(f"For the price of the {title} the results are ", file=out)
        out.write(_format_rows(_convergence(option, spot, vol, r, paths, rng)))

    option = VanillaOption(PayOffCall(strike), expiry)
    report("call option", option)

    second_option = copy.copy(option)
    report("(copy-constructed) call option", second_option)

    third_option = VanillaOption(PayOffPut(strike), expiry)
    option = copy.copy(third_option)
    report("put option", option)

    print("Let's consider now a double-digital option: ", file=out)
    low = ask.ask("Enter Lower Option Level", float)
    up = ask.ask("Enter Upper Option Level", float)
    digital_option = VanillaOption(PayOffDoubleDigital(low, up), expiry)
    report("double-digital option", digital_option)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcoptions-stats",
        description=(
            "Monte Carlo pricer printing, for a call, a put and a double digital, "
            "the running price at every power of two paths."
        ),
    )
    parser.add_argument("--seed", type=int, default=None, help="seed of the random source")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read the parameters from standard input and print the tables."""
    args = _build_parser().parse_args(argv)
    out = sys.stdout
    prompter = _Prompter(sys.stdin, out)
    rng = random.Random(args.seed)
    try:
        _run(prompter, out, rng)
    except InputError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())