import niquests
import pytest

from apitest.scenarios.base import AssertionFailure, Diagnostics
from apitest.scenarios.cast import ActorIsMainAndGuest, ActorIsMainCast, ActorNotInEpisode
from apitest.scenarios.seasons import EpisodeCountsPerSeason, SeasonsMatchExpected
from tests.payloads import BASE_URL, MYRCELLA, credits_payload, show_payload

SHOW_URL = f"{BASE_URL}tv/1396"


def credits_url(season: int, episode: int) -> str:
    return f"{BASE_URL}tv/1399/season/{season}/episode/{episode}/credits"


def test_diagnostics_collects_every_mismatch():
    diagnostics = Diagnostics()
    assert diagnostics.expect_equal("Season 5", 16, 16)
    assert not diagnostics.expect_equal("Season 2", 13, 12)
    assert not diagnostics.expect_equal("Season 1", 7, 8)

    with pytest.raises(AssertionFailure) as excinfo:
        diagnostics.raise_if_any()

    assert excinfo.value.diagnostics == [
        " Season 2: Expected: [13], Actual: [12]",
        " Season 1: Expected: [7], Actual: [8]",
    ]
    assert str(excinfo.value) == (
        " Season 2: Expected: [13], Actual: [12]\n Season 1: Expected: [7], Actual: [8]"
    )


def test_diagnostics_without_mismatches_does_not_raise():
    diagnostics = Diagnostics()
    assert diagnostics.expect_equal("Season 5", 16, 16)

    diagnostics.raise_if_any()

    assert "__bool__" not in vars(Diagnostics)


def test_assertion_failure_is_an_assertion_error():
    assert issubclass(AssertionFailure, AssertionError)
    assert AssertionFailure("single line").diagnostics == ["single line"]


def test_seasons_match_expected_passes(make_client):
    client = make_client({SHOW_URL: show_payload({1: 8, 2: 13, 3: 13, 4: 13, 5: 16})})

    result = SeasonsMatchExpected().run(client)

    assert result.passed
    assert result.name == "seasons-match-expected"
    assert result.message == ""


def test_seasons_match_expected_fails_on_extra_season(make_client):
    client = make_client({SHOW_URL: show_payload({0: 9, 1: 8, 2: 13, 3: 13, 4: 13, 5: 16})})

    result = SeasonsMatchExpected().run(client)

    assert not result.passed
    assert "Expected: SeasonSet([5:16, 4:13, 3:13, 2:13, 1:8])" in result.message
    assert "Actual: SeasonSet([5:16, 4:13, 3:13, 2:13, 1:8, 0:9])" in result.message


def test_season_one_expectations_disagree(make_client):
    """The two Breaking Bad checks cannot both pass: season 1 is 8 in one, 7 in the other."""
    client = make_client({SHOW_URL: show_payload({1: 8, 2: 13, 3: 13, 4: 13, 5: 16})})

    assert SeasonsMatchExpected().run(client).passed
    counts = EpisodeCountsPerSeason().run(client)
    assert not counts.passed
    assert counts.message == " Season 1: Expected: [7], Actual: [8]"


def test_episode_counts_reports_all_mismatches(make_client):
    client = make_client({SHOW_URL: show_payload({1: 7, 2: 10, 3: 13, 4: 12, 5: 16})})

    with pytest.raises(AssertionFailure) as excinfo:
        EpisodeCountsPerSeason().check(client)

    # Iteration follows the season order, highest id first
    assert excinfo.value.diagnostics == [
        " Season 4: Expected: [13], Actual: [12]",
        " Season 2: Expected: [13], Actual: [10]",
    ]


def test_episode_counts_ignores_unlisted_seasons(make_client):
    client = make_client({SHOW_URL: show_payload({0: 4, 1: 7, 2: 13, 3: 13, 4: 13, 5: 16})})

    assert EpisodeCountsPerSeason().run(client).passed


def test_actor_not_in_episode(make_client):
    client = make_client({credits_url(6, 1): credits_payload()})
    assert ActorNotInEpisode().run(client).passed


def test_actor_not_in_episode_fails_when_guest(make_client):
    client = make_client({credits_url(6, 1): credits_payload(guest_stars=[MYRCELLA])})

    result = ActorNotInEpisode().run(client)

    assert not result.passed
    assert "guest stars: Expected: [False], Actual: [True]" in result.message


def test_actor_is_main_cast(make_client):
    client = make_client({credits_url(5, 1): credits_payload(cast=[MYRCELLA])})
    assert ActorIsMainCast().run(client).passed


def test_actor_is_main_cast_fails_when_also_guest(make_client):
    client = make_client({credits_url(5, 1): credits_payload(cast=[MYRCELLA], guest_stars=[MYRCELLA])})
    assert not ActorIsMainCast().run(client).passed


def test_actor_is_main_and_guest(make_client):
    client = make_client({credits_url(5, 2): credits_payload(cast=[MYRCELLA], guest_stars=[MYRCELLA])})
    assert ActorIsMainAndGuest().run(client).passed


def test_actor_is_main_and_guest_reports_both_lists(make_client):
    client = make_client({credits_url(5, 2): credits_payload()})

    with pytest.raises(AssertionFailure) as excinfo:
        ActorIsMainAndGuest().check(client)

    assert len(excinfo.value.diagnostics) == 2


def test_matching_requires_both_name_and_character(make_client):
    impostor = dict(MYRCELLA, character="Myrcella")
    client = make_client({credits_url(5, 1): credits_payload(cast=[impostor])})
    assert not ActorIsMainCast().run(client).passed


def test_request_error_is_reported_not_raised(make_client):
    client = make_client({})
    client.session.get.side_effect = niquests.exceptions.ConnectionError("down")

    result = SeasonsMatchExpected().run(client)

    assert not result.passed
    assert result.message.startswith("ApiRequestError:")


def test_deserialization_error_is_reported_not_raised(make_client):
    client = make_client({credits_url(5, 1): {"cast": []}})

    result = ActorIsMainCast().run(client)

    assert not result.passed
    assert result.message.startswith("DeserializationError:")


def test_description_comes_from_docstring():
    assert ActorIsMainCast().description == "The character is main cast but not a guest star in S5E1."
