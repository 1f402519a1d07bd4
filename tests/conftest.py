import pytest

from apitest.services.tmdb import TmdbClient
from tests.payloads import BASE_URL, routed_session


@pytest.fixture
def make_client():
    def factory(routes: dict) -> TmdbClient:
        return TmdbClient(
            base_url=BASE_URL,
            api_key="test-key",
            timeout=5.0,
            session=routed_session(routes),
        )

    return factory
