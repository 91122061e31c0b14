"""
Runner for executing matchers by name, profiling them, and counting results.

Usage (example from CLI):
    from reducekit.runner import RunConfig, run_matcher

    result = run_matcher(RunConfig(matcher="prefix", target="Sa", items=DRIVERS))
    print(result["matches"], result["count"])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from reducekit.aggregation import count_items
from reducekit.errors import UnknownMatcherError
from reducekit.matching.abstract import MatchStrategy
from reducekit.matching.records import RecordMatcher
from reducekit.matching.strings import CaseInsensitiveMatcher, ExactMatcher, PrefixMatcher
from reducekit.utils.logging import get_logger
from reducekit.utils.profiler import profile_block

log = get_logger(__name__)


@dataclass
class RunConfig:
    """Parameters of a single matcher run."""

    matcher: str
    target: str
    items: Sequence[Any] = field(default_factory=list)


def _matcher_factories() -> Dict[str, Callable[[], MatchStrategy]]:
    """Registry of available matchers."""
    return {
        "exact": lambda: ExactMatcher(),
        "case_insensitive": lambda: CaseInsensitiveMatcher(),
        "prefix": lambda: PrefixMatcher(),
        "record": lambda: RecordMatcher(),
    }


def available_matchers() -> List[str]:
    """List available matcher names."""
    return sorted(_matcher_factories().keys())


def resolve_matcher(name: str) -> MatchStrategy:
    factories = _matcher_factories()
    if name not in factories:
        raise UnknownMatcherError(name, sorted(factories))
    return factories[name]()


def _normalize_matches(matches: Any) -> List[Any]:
    """Render set results sorted so output is stable between runs."""
    if isinstance(matches, (set, frozenset)):
        return sorted(matches)
    return list(matches)


def run_matcher(config: RunConfig, matcher: Optional[MatchStrategy] = None) -> Dict[str, Any]:
    """
    Run a matcher and return its matches along with a count and profile.

    Parameters
    ----------
    config : RunConfig
        Matcher name, target, and candidate items.
    matcher : MatchStrategy | None
        Pre-built matcher to use instead of resolving `config.matcher`.

    Returns
    -------
    dict
        Keys: matcher, target, matches, count, profile. When the matcher
        raises, matches is empty, count is 0, and error holds the message.

    Raises
    ------
    UnknownMatcherError
        If `config.matcher` is not registered and no matcher was passed.
    """
    strategy = matcher or resolve_matcher(config.matcher)
    log.info(f"[MATCHER START] {strategy.name}", extra={"matcher": strategy.name})

    result: Dict[str, Any] = {"matcher": strategy.name, "target": config.target}
    with profile_block(strategy.name) as stats:
        try:
            matches = strategy.match(config.items, config.target)
            result["matches"] = _normalize_matches(matches)
            result["count"] = count_items(result["matches"])
            log.info(
                f"[MATCHER SUCCESS] {strategy.name}",
                extra={"matcher": strategy.name, "count": result["count"]},
            )
        except Exception as exc:  # noqa: BLE001 - record failures in the result
            log.exception(f"[MATCHER FAILED] {strategy.name}", extra={"matcher": strategy.name})
            result["matches"] = []
            result["count"] = 0
            result["error"] = str(exc)

    result["profile"] = stats.as_dict()
    return result


__all__ = [
    "RunConfig",
    "available_matchers",
    "resolve_matcher",
    "run_matcher",
]
