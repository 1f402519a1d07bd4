import argparse
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from apitest.core.config import get_settings
from apitest.services.runner import available_scenarios, run_scenarios
from apitest.services.tmdb import TmdbClient

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="apitest",
        description="Check TMDB show and episode data against known facts.",
    )
    parser.add_argument("scenarios", nargs="*", help="Scenario names to run (default: all).")
    parser.add_argument("--list", action="store_true", help="List scenarios and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    if args.list:
        for scenario in available_scenarios():
            print(f"{scenario.name}: {scenario.description}")
        return 0

    load_dotenv()
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or settings.debug) else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Using TMDB at %s (timeout %ss)", settings.tmdb_base_url, settings.request_timeout)

    with TmdbClient.from_settings(settings) as client:
        try:
            results = run_scenarios(client, args.scenarios)
        except KeyError as exc:
            print(exc.args[0], file=sys.stderr)
            return 2

    for result in results:
        print(f"{'PASS' if result.passed else 'FAIL'} {result.name}")
        if result.message:
            print(result.message)

    return 0 if all(r.passed for r in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
