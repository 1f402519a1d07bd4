"""Scenario base classes and interfaces."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List

from pydantic import BaseModel

from apitest.models.media import DeserializationError
from apitest.services.tmdb import ApiRequestError, TmdbClient

logger = logging.getLogger(__name__)


class ScenarioResult(BaseModel):
    """Outcome of a single scenario run."""

    name: str
    passed: bool
    message: str = ""  # Diagnostics, empty when the scenario passed


class AssertionFailure(AssertionError):
    """A domain expectation did not hold.

    Carries every mismatch found, one diagnostic line each.
    """

    def __init__(self, diagnostics: List[str] | str):
        if isinstance(diagnostics, str):
            diagnostics = [diagnostics]
        self.diagnostics = list(diagnostics)
        super().__init__("\n".join(self.diagnostics))


class Diagnostics:
    """Collects mismatches so a scenario can report all of them at once."""

    def __init__(self):
        self.lines: List[str] = []

    def add(self, line: str) -> None:
        self.lines.append(line)

    def expect_equal(self, label: str, expected: Any, actual: Any) -> bool:
        if expected == actual:
            return True
        self.add(f" {label}: Expected: [{expected}], Actual: [{actual}]")
        return False

    def raise_if_any(self) -> None:
        if self.lines:
            raise AssertionFailure(self.lines)


class Scenario(ABC):
    """Abstract base class for checks against live TMDB data.

    Each scenario fetches its own data through the client it is given;
    scenarios share no state and can run in any order.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique name of this scenario."""
        pass

    @property
    def description(self) -> str:
        doc = (self.__doc__ or "").strip()
        return doc.splitlines()[0] if doc else ""

    @abstractmethod
    def check(self, client: TmdbClient) -> None:
        """Fetch the data and verify the expectation.

        Raises:
            AssertionFailure: if the expectation does not hold.
            ApiRequestError: if the request fails.
            DeserializationError: if the response does not match the schema.
        """
        pass

    def run(self, client: TmdbClient) -> ScenarioResult:
        """Run :meth:`check` and report the outcome as a result."""
        try:
            self.check(client)
        except AssertionFailure as exc:
            logger.warning("Scenario %s failed:\n%s", self.name, exc)
            return ScenarioResult(name=self.name, passed=False, message=str(exc))
        except (ApiRequestError, DeserializationError) as exc:
            logger.error("Scenario %s errored: %s", self.name, exc)
            return ScenarioResult(
                name=self.name,
                passed=False,
                message=f"{type(exc).__name__}: {exc}",
            )

        logger.info("Scenario %s passed", self.name)
        return ScenarioResult(name=self.name, passed=True)
