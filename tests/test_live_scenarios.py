"""Scenarios against the real TMDB API.

Requires TMDB_API_KEY in the environment and network access.
"""

import os

import pytest

from apitest.core.config import Settings
from apitest.scenarios.cast import ActorIsMainAndGuest, ActorIsMainCast, ActorNotInEpisode
from apitest.scenarios.seasons import EpisodeCountsPerSeason, SeasonsMatchExpected
from apitest.services.tmdb import TmdbClient

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not os.getenv("TMDB_API_KEY"), reason="TMDB_API_KEY not set"),
]

SEASON_ONE_CONFLICT = pytest.mark.xfail(
    reason="Season 1 is expected to have 8 episodes in one check and 7 in the other",
    strict=False,
)


@pytest.fixture
def client():
    with TmdbClient.from_settings(Settings()) as tmdb:
        yield tmdb


@pytest.mark.parametrize(
    "scenario",
    [
        pytest.param(SeasonsMatchExpected(), marks=SEASON_ONE_CONFLICT, id="seasons-match-expected"),
        pytest.param(EpisodeCountsPerSeason(), marks=SEASON_ONE_CONFLICT, id="episode-counts-per-season"),
        pytest.param(ActorNotInEpisode(), id="actor-not-in-episode"),
        pytest.param(ActorIsMainCast(), id="actor-is-main-cast"),
        pytest.param(ActorIsMainAndGuest(), id="actor-is-main-and-guest"),
    ],
)
def test_live_scenario(client, scenario):
    scenario.check(client)
