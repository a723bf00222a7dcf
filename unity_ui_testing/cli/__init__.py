from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from unity_ui_testing.app.configuration import load_test_configuration

logger = logging.getLogger("unity_ui_testing.cli")

E2E_TESTS_DIR = Path(__file__).resolve().parents[1] / "tests" / "e2e"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="unity-ui-testing", description="Unity game UI test runner")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("config", help="Print the configuration resolved from the environment")

    run_parser = subparsers.add_parser("run", help="Run the end-to-end suite against a running game")
    run_parser.add_argument("--alluredir", type=Path, default=Path("allure-results"), help="Allure results directory")

    # Unrecognised arguments of "run" are handed to pytest untouched.
    args, extra = parser.parse_known_args(argv)
    if extra and args.command != "run":
        parser.error(f"unrecognized arguments: {' '.join(extra)}")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s - %(message)s")

    if args.command == "config":
        return _handle_config()
    if args.command == "run":
        return _handle_run(args.alluredir, extra)
    parser.print_help()
    return 1


def _handle_config() -> int:
    config = load_test_configuration()
    print(json.dumps(config.as_dict(), indent=2, sort_keys=True))
    return 0


def _handle_run(alluredir: Path, extra: List[str]) -> int:
    import pytest

    config = load_test_configuration()
    logger.info(
        "Running e2e suite on %s against %s:%s",
        config.platform.value,
        config.server_host,
        config.server_port,
    )
    pytest_args = [str(E2E_TESTS_DIR), "-m", "e2e", "-o", "log_cli=true", f"--alluredir={alluredir}", *extra]
    logger.debug("pytest arguments: %s", pytest_args)
    return int(pytest.main(pytest_args))


if __name__ == "__main__":
    sys.exit(main())
