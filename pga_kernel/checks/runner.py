"""
Driver for the kernel self-checks.

Runs the registered checks, logs each outcome and prints the summary:

    <n> tests executed.
    <n> tests passed.
    <n> tests failed.

A check that raises counts as failed; the run always continues.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
import argparse
import sys

from tqdm import tqdm

from .scenarios import CHECKS
from ..utils.config import HarnessConfig, load_config
from ..utils.log import get_logger, set_level

logger = get_logger(__name__)


@dataclass
class CheckReport:
    """Outcome of a verification run, in execution order."""

    results: Dict[str, bool] = field(default_factory=dict)

    @property
    def executed(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for ok in self.results.values() if ok)

    @property
    def failed(self) -> int:
        return self.executed - self.passed

    @property
    def failures(self) -> List[str]:
        return [name for name, ok in self.results.items() if not ok]


def select_checks(
    only: Optional[List[str]] = None,
    registry: Optional[Dict[str, Callable[[], bool]]] = None
) -> Dict[str, Callable[[], bool]]:
    """
    Pick the checks to run, keeping registry order.

    Args:
        only: Check names; None or empty selects every check
        registry: Mapping of name to check; defaults to CHECKS

    Raises:
        ValueError: If a requested name is not registered
    """
    registry = CHECKS if registry is None else registry
    if not only:
        return dict(registry)

    unknown = [name for name in only if name not in registry]
    if unknown:
        raise ValueError(f"Unknown checks: {unknown}. Available: {list(registry.keys())}")
    return {name: check for name, check in registry.items() if name in only}


def run_checks(
    config: Optional[HarnessConfig] = None,
    registry: Optional[Dict[str, Callable[[], bool]]] = None
) -> CheckReport:
    """
    Run checks and collect their boolean outcomes.

    Args:
        config: Harness configuration
        registry: Mapping of name to check; defaults to CHECKS

    Returns:
        CheckReport
    """
    config = config or HarnessConfig()
    selected = select_checks(config.only, registry)
    report = CheckReport()

    for name, check in tqdm(selected.items(), desc='Checks', disable=not config.show_progress):
        try:
            ok = bool(check())
        except Exception:
            logger.exception("Check %s raised", name)
            ok = False

        report.results[name] = ok
        if ok:
            logger.debug("Check %s passed", name)
        else:
            logger.warning("Check %s failed", name)

    return report


def format_report(report: CheckReport) -> str:
    """The three summary lines of a run."""
    return (
        f"{report.executed} tests executed.\n"
        f"{report.passed} tests passed.\n"
        f"{report.failed} tests failed."
    )


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pga-kernel-check",
        description="Run the PGA kernel self-checks and report pass/fail counts.",
    )
    p.add_argument("--config", default=None, help="JSON harness configuration")
    p.add_argument("--only", action="append", default=None, metavar="NAME",
                   help="Run only this check (repeatable)")
    p.add_argument("--list", dest="list_checks", action="store_true",
                   help="List registered checks and exit")
    p.add_argument("--progress", dest="progress", action="store_true", default=None)
    p.add_argument("--no-progress", dest="progress", action="store_false")
    p.add_argument("--strict", action="store_true", default=None,
                   help="Exit with status 1 if any check fails")
    p.add_argument("--log-level", default=None)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point.

    Returns:
        Process exit status: 0 unless strict mode is on and a check failed

    Unknown check names and log levels are reported through argparse
    (exit status 2).
    """
    parser = _parser()
    args = parser.parse_args(argv)

    if args.list_checks:
        for name in CHECKS:
            print(name)
        return 0

    config = load_config(args.config) if args.config else HarnessConfig()
    overrides = {}
    if args.only is not None:
        overrides['only'] = args.only
    if args.progress is not None:
        overrides['show_progress'] = args.progress
    if args.strict is not None:
        overrides['strict'] = args.strict
    if args.log_level is not None:
        overrides['log_level'] = args.log_level
    if overrides:
        config = config.update(**overrides)

    try:
        select_checks(config.only)
        if config.log_level:
            set_level(config.log_level)
    except ValueError as e:
        parser.error(str(e))

    report = run_checks(config)
    print(format_report(report))

    if config.strict and report.failed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
