"""Season and episode-count checks for Breaking Bad (TMDB id 1396)."""

from typing import Dict

from apitest.models.media import Season
from apitest.models.ordering import SeasonSet
from apitest.scenarios.base import AssertionFailure, Diagnostics, Scenario
from apitest.services.tmdb import TmdbClient

BREAKING_BAD_ID = 1396


class SeasonsMatchExpected(Scenario):
    """The show's season set equals the expected seasons, in order."""

    show_id = BREAKING_BAD_ID
    # Season 1 disagrees with EpisodeCountsPerSeason (8 here, 7 there).
    # Kept as-is until confirmed against live data.
    expected = SeasonSet(
        [
            Season(id=5, episode_count=16),
            Season(id=4, episode_count=13),
            Season(id=1, episode_count=8),
            Season(id=3, episode_count=13),
            Season(id=2, episode_count=13),
        ]
    )

    @property
    def name(self) -> str:
        return "seasons-match-expected"

    def check(self, client: TmdbClient) -> None:
        show = client.get_show(self.show_id)
        if not show.seasons.matches(self.expected):
            raise AssertionFailure(
                [f" Expected: {self.expected!r}", f" Actual: {show.seasons!r}"]
            )


class EpisodeCountsPerSeason(Scenario):
    """Each listed season has the expected number of episodes."""

    show_id = BREAKING_BAD_ID
    expected_counts: Dict[int, int] = {5: 16, 4: 13, 3: 13, 2: 13, 1: 7}

    @property
    def name(self) -> str:
        return "episode-counts-per-season"

    def check(self, client: TmdbClient) -> None:
        show = client.get_show(self.show_id)
        diagnostics = Diagnostics()
        for season in show.seasons:
            expected = self.expected_counts.get(season.id)
            if expected is None:
                continue
            diagnostics.expect_equal(
                f"Season {season.id}", expected, season.episode_count
            )
        diagnostics.raise_if_any()
