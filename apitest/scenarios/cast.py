"""Cast membership checks on Game of Thrones (TMDB id 1399) episode credits."""

from apitest.scenarios.base import Diagnostics, Scenario
from apitest.services.tmdb import TmdbClient

GAME_OF_THRONES_ID = 1399


class EpisodeCastScenario(Scenario):
    """Checks whether one actor/character pair is credited in an episode.

    Subclasses set the episode coordinates and whether the pair is expected
    in the main cast and in the guest stars.
    """

    show_id = GAME_OF_THRONES_ID
    season: int
    episode: int
    real_name = "Nell Tiger Free"
    cast_name = "Myrcella Baratheon"
    expected_in_cast: bool
    expected_as_guest: bool

    def check(self, client: TmdbClient) -> None:
        episode_credits = client.get_episode_credits(self.show_id, self.season, self.episode)
        in_cast = episode_credits.find_cast(self.real_name, self.cast_name) is not None
        as_guest = episode_credits.find_guest(self.real_name, self.cast_name) is not None

        diagnostics = Diagnostics()
        who = f"{self.real_name} as {self.cast_name} in S{self.season}E{self.episode}"
        diagnostics.expect_equal(f"{who} cast", self.expected_in_cast, in_cast)
        diagnostics.expect_equal(f"{who} guest stars", self.expected_as_guest, as_guest)
        diagnostics.raise_if_any()


class ActorNotInEpisode(EpisodeCastScenario):
    """The character is absent from both cast and guest stars in S6E1."""

    season = 6
    episode = 1
    expected_in_cast = False
    expected_as_guest = False

    @property
    def name(self) -> str:
        return "actor-not-in-episode"


class ActorIsMainCast(EpisodeCastScenario):
    """The character is main cast but not a guest star in S5E1."""

    season = 5
    episode = 1
    expected_in_cast = True
    expected_as_guest = False

    @property
    def name(self) -> str:
        return "actor-is-main-cast"


class ActorIsMainAndGuest(EpisodeCastScenario):
    """The character is credited both as main cast and guest star in S5E2."""

    season = 5
    episode = 2
    expected_in_cast = True
    expected_as_guest = True

    @property
    def name(self) -> str:
        return "actor-is-main-and-guest"
