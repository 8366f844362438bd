from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Iterable, Mapping

from arbor.errors import (ConfigurationError, UnbalancedBracketsError,
                          UnrecognizedSymbolError)
from arbor.lsystem.derivation import derive

DEFAULT_AXIOM = "X"


class Operator(StrEnum):
    BRANCH = "F"
    ROOT = "R"
    LEAF = "L"
    TURN = "*"
    PUSH = "["
    POP = "]"


OPERATOR_SYMBOLS = frozenset(operator.value for operator in Operator)


def _require_symbol(value: str, what: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigurationError(f"{what} must be a single character, got {value!r}")


@dataclass(frozen=True)
class RuleSet:
    """An axiom and its context-free productions.

    Symbols without a production are copied unchanged by a derivation.
    """

    axiom: str = DEFAULT_AXIOM
    productions: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _require_symbol(self.axiom, "axiom")
        for symbol, replacement in self.productions.items():
            _require_symbol(symbol, "production symbol")
            if not isinstance(replacement, str):
                raise ConfigurationError(
                    f"replacement for {symbol!r} must be a string"
                )
        object.__setattr__(
            self, "productions", MappingProxyType(dict(self.productions))
        )

    def __hash__(self) -> int:
        return hash((self.axiom, frozenset(self.productions.items())))

    @classmethod
    def single(cls, replacement: str, *, axiom: str = DEFAULT_AXIOM) -> RuleSet:
        """Build the common one-rule form ``axiom -> replacement``."""

        return cls(axiom=axiom, productions={axiom: replacement})

    def replacement(self, symbol: str) -> str:
        return self.productions.get(symbol, symbol)

    def derive(self, iterations: int) -> str:
        return derive(self.axiom, self.productions, iterations)


def bracket_depths(sequence: str) -> Iterable[int]:
    """Yield the bracket nesting depth after each symbol of ``sequence``."""

    depth = 0
    for symbol in sequence:
        if symbol == Operator.PUSH:
            depth += 1
        elif symbol == Operator.POP:
            depth -= 1
        yield depth


def is_bracket_balanced(sequence: str) -> bool:
    depth = 0
    for depth in bracket_depths(sequence):
        if depth < 0:
            return False
    return depth == 0


def validate_ruleset(rules: RuleSet, *, extra_symbols: Iterable[str] = ()) -> None:
    """Reject productions that would fail once they reach the turtle.

    Every replacement must be bracket-balanced and made only of operators,
    the axiom, symbols that have their own production, or ``extra_symbols``.
    """

    known = OPERATOR_SYMBOLS | {rules.axiom} | set(rules.productions) | set(
        extra_symbols
    )
    for symbol, replacement in rules.productions.items():
        for index, candidate in enumerate(replacement):
            if candidate not in known:
                raise UnrecognizedSymbolError(
                    f"Production {symbol!r} uses unknown symbol {candidate!r}",
                    symbol=candidate,
                    index=index,
                )
        if not is_bracket_balanced(replacement):
            raise UnbalancedBracketsError(
                f"Production {symbol!r} is not bracket-balanced: {replacement!r}",
                symbol=symbol,
                index=len(replacement),
            )
