from __future__ import annotations

from typing import Iterator, Mapping

from arbor.errors import DerivationError
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


def _rewrite(sequence: str, productions: Mapping[str, str]) -> str:
    return "".join(productions.get(symbol, symbol) for symbol in sequence)


def iter_derivations(
    axiom: str, productions: Mapping[str, str], iterations: int
) -> Iterator[str]:
    """Yield the axiom followed by each of ``iterations`` rewritten generations."""

    if iterations < 0:
        raise DerivationError(f"iterations must be >= 0, got {iterations}")

    sequence = axiom
    yield sequence
    for _ in range(iterations):
        sequence = _rewrite(sequence, productions)
        yield sequence


def derive(axiom: str, productions: Mapping[str, str], iterations: int) -> str:
    """Rewrite ``axiom`` ``iterations`` times with context-free productions.

    Length can grow exponentially with ``iterations``; callers bound it.
    """

    sequence = axiom
    for sequence in iter_derivations(axiom, productions, iterations):
        pass
    logger.debug(
        "Derived %d symbols from %r after %d iterations",
        len(sequence),
        axiom,
        iterations,
    )
    return sequence
