"""Runner for executing the built-in scenarios against TMDB."""

import logging
from typing import Iterable, List, Tuple, Type

from apitest.scenarios.base import Scenario, ScenarioResult
from apitest.scenarios.cast import ActorIsMainAndGuest, ActorIsMainCast, ActorNotInEpisode
from apitest.scenarios.seasons import EpisodeCountsPerSeason, SeasonsMatchExpected
from apitest.services.tmdb import TmdbClient

logger = logging.getLogger(__name__)

DEFAULT_SCENARIOS: Tuple[Type[Scenario], ...] = (
    SeasonsMatchExpected,
    EpisodeCountsPerSeason,
    ActorNotInEpisode,
    ActorIsMainCast,
    ActorIsMainAndGuest,
)


def available_scenarios() -> List[Scenario]:
    """Fresh instances of every built-in scenario, in declaration order."""
    return [scenario_cls() for scenario_cls in DEFAULT_SCENARIOS]


def select_scenarios(names: Iterable[str] | None = None) -> List[Scenario]:
    """Resolve scenario names to new scenario instances.

    All built-in scenarios are returned when ``names`` is empty or None.

    Raises:
        KeyError: if a name is unknown.
    """
    scenarios = available_scenarios()
    names = list(names or [])
    if not names:
        return scenarios

    by_name = {scenario.name: scenario for scenario in scenarios}
    selected = []
    for name in names:
        if name not in by_name:
            known = ", ".join(by_name)
            raise KeyError(f"Unknown scenario {name!r} (known: {known})")
        selected.append(by_name[name])
    return selected


def run_scenarios(
    client: TmdbClient, names: Iterable[str] | None = None
) -> List[ScenarioResult]:
    """Run scenarios one after another and collect their results.

    Each scenario performs its own requests; a failing scenario does not
    stop the ones after it.
    """
    scenarios = select_scenarios(names)
    results: List[ScenarioResult] = []
    for scenario in scenarios:
        logger.debug("Running scenario %s", scenario.name)
        results.append(scenario.run(client))

    failed = sum(1 for r in results if not r.passed)
    logger.info("Ran %d scenario(s), %d failed", len(results), failed)
    return results
