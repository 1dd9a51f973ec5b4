"""Interactive pricers for calls, puts, digitals and power options."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Iterable, Iterator, List, Sequence, TextIO, TypeVar

from .montecarlo import simple_monte_carlo1, simple_monte_carlo2
from .payoff import (
    OptionType,
    PayOffByType,
    PayOffCallPower,
    PayOffDoubleDigital,
    PayOffPutPower,
)

T = TypeVar("T")


class InputError(Exception):
    """Raised when the parameters cannot be read."""


def _number_of_paths(token: str) -> int:
    value = int(token)
    if value < 1:
        raise ValueError("number of paths must be at least 1")
    return value


class _Prompter:
    """Reads whitespace-separated answers after printing each prompt."""

    def __init__(self, stream: TextIO, out: TextIO) -> None:
        self._tokens = self._split(stream)
        self._out = out

    @staticmethod
    def _split(stream: Iterable[str]) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def _next(self, prompt: str) -> str:
        print(f"\n{prompt}", file=self._out)
        try:
            return next(self._tokens)
        except StopIteration:
            raise InputError(f"input ended before: {prompt.strip()}") from None

    def ask(self, prompt: str, convert: Callable[[str], T]) -> T:
        token = self._next(prompt)
        try:
            return convert(token)
        except ValueError:
            raise InputError(f"invalid value {token!r} for: {prompt.strip()}") from None

    def choose(self, prompt: str, choices: Sequence[int]) -> int:
        """Ask again until one of ``choices`` is entered."""
        while True:
            token = self._next(prompt)
            try:
                value = int(token)
            except ValueError:
                continue
            if value in choices:
                return value


def _market(ask: _Prompter) -> tuple:
    spot = ask.ask("Enter spot", float)
    vol = ask.ask("Enter vol", float)
    r = ask.ask("Enter r", float)
    paths = ask.ask(" Number of paths", _number_of_paths)
    return spot, vol, r, paths


def _run_vanilla(ask: _Prompter, rng: random.Random) -> List[str]:
    kind = ask.choose("Kind of contract? (press 0 for 'calls', 1 for 'puts')", (0, 1))
    option_type = (OptionType.CALL, OptionType.PUT)[kind]
    expiry = ask.ask("Enter expiry", float)
    strike = ask.ask("Enter Strike", float)
    spot, vol, r, paths = _market(ask)
    price = simple_monte_carlo1(expiry, strike, spot, vol, r, paths, option_type, rng)
    return [f"the price is {price:g}"]


def _run_payoff(ask: _Prompter, rng: random.Random) -> List[str]:
    kind = ask.choose(
        "Kind of option? (press 0 for 'calls', 1 for 'puts', "
        "2 for 'digital-calls', 3 for 'digital-puts')",
        (0, 1, 2, 3),
    )
    option_type = (
        OptionType.CALL,
        OptionType.PUT,
        OptionType.CALL_DIGITAL,
        OptionType.PUT_DIGITAL,
    )[kind]
    expiry = ask.ask("Enter expiry", float)
    strike = ask.ask("Enter Strike", float)
    payoff = PayOffByType(strike, option_type)
    spot, vol, r, paths = _market(ask)
    price = simple_monte_carlo2(payoff, expiry, spot, vol, r, paths, rng)
    return [f"the price is {price:g}"]


def _run_pair(ask: _Prompter, rng: random.Random) -> List[str]:
    expiry = ask.ask("Enter expiry", float)
    strike = ask.ask("Enter Strike", float)
    spot, vol, r, paths = _market(ask)
    call = simple_monte_carlo2(
        PayOffByType(strike, OptionType.CALL), expiry, spot, vol, r, paths, rng
    )
    put = simple_monte_carlo2(
        PayOffByType(strike, OptionType.PUT), expiry, spot, vol, r, paths, rng
    )
    return [
        f"the price of the call option is {call:g}",
        f"the price of the put option is {put:g}",
    ]


def _run_double_digital(ask: _Prompter, rng: random.Random) -> List[str]:
    expiry = ask.ask("Enter expiry", float)
    low = ask.ask("Enter Lower Option Level", float)
    up = ask.ask("Enter Upper Option Level", float)
    payoff = PayOffDoubleDigital(low, up)
    spot, vol, r, paths = _market(ask)
    price = simple_monte_carlo2(payoff, expiry, spot, vol, r, paths, rng)
    return [f"the price of the double-digital option is {price:g}"]


def _run_power(ask: _Prompter, rng: random.Random) -> List[str]:
    expiry = ask.ask("Enter expiry", float)
    strike = ask.ask("Enter Strike", float)
    power = ask.ask("Enter Power", int)
    spot, vol, r, paths = _market(ask)
    call = simple_monte_carlo2(
        PayOffCallPower(strike, power), expiry, spot, vol, r, paths, rng
    )
    put = simple_monte_carlo2(
        PayOffPutPower(strike, power), expiry, spot, vol, r, paths, rng
    )
    return [
        f"the price of the call power option is {call:g}",
        f"the price of the put power option is {put:g}",
    ]


_COMMANDS = {
    "vanilla": (_run_vanilla, "price a call or a put"),
    "payoff": (_run_payoff, "price a call, put, digital call or digital put"),
    "pair": (_run_pair, "price a call and a put on the same strike"),
    "double-digital": (_run_double_digital, "price a double-digital option"),
    "power": (_run_power, "price a call and a put power option"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcoptions-basic",
        description="Monte Carlo option pricer reading its parameters from standard input.",
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
    prompter = _Prompter(sys.stdin, sys.stdout)
    rng = random.Random(args.seed)
    try:
        lines = run(prompter, rng)
    except InputError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())