"""Main entry point for Career Match."""

import argparse
import json
import sys
from datetime import UTC, date, datetime
from pathlib import Path

from pydantic import ValidationError

from career_match import __version__
from career_match.config.settings import Settings, SortOrder
from career_match.utils.logging import configure_logging


def _reference_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"--now must be a date in YYYY-MM-DD form (got {value!r})"
        ) from None


def _timestamp_run_id(prefix: str) -> str:
    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}"


def _resolve_run_dir(
    settings: Settings, *, prefix: str, out_run_dir: Path | None
) -> Path:
    if out_run_dir is not None:
        run_dir = out_run_dir
    else:
        run_dir = settings.output_dir / "runs" / _timestamp_run_id(prefix)
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def _write_json(path: Path, payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    path.write_text(
        json.dumps(payload, indent=2, default=_default),
        encoding="utf-8",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="career-match",
        description="Career Match: rank careers against a user profile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m career_match recommend --profile profiles/profile.yaml
  python -m career_match recommend --profile me.json --catalog careers.yaml --sort salary
  python -m career_match normalize --profile profiles/profile.yaml --now 2024-06-01
  python -m career_match catalog
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    recommend_parser = subparsers.add_parser(
        "recommend",
        help="Rank the catalog against a profile",
    )
    recommend_parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Path to a profile file (YAML/JSON); defaults to SCORING_PROFILE_PATH",
    )
    recommend_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to a career catalog (YAML/JSON); defaults to the built-in catalog",
    )
    recommend_parser.add_argument(
        "--now",
        type=_reference_date,
        default=None,
        help="Reference date for ongoing roles (YYYY-MM-DD, default: today)",
    )
    recommend_parser.add_argument(
        "--sort",
        choices=[order.value for order in SortOrder],
        default=None,
        help="Display order for the recommendations (overrides settings)",
    )
    recommend_parser.add_argument(
        "--out-run-dir",
        type=Path,
        default=None,
        help="Optional output run directory (defaults under artifacts/runs/)",
    )

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Print the weighted features derived from a profile",
    )
    normalize_parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Path to a profile file (YAML/JSON); defaults to SCORING_PROFILE_PATH",
    )
    normalize_parser.add_argument(
        "--now",
        type=_reference_date,
        default=None,
        help="Reference date for ongoing roles (YYYY-MM-DD, default: today)",
    )

    catalog_parser = subparsers.add_parser(
        "catalog",
        help="List the careers in the catalog",
    )
    catalog_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to a career catalog (YAML/JSON); defaults to the built-in catalog",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Load settings
    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Configure logging
    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    # If no command specified, show help
    if parsed.command is None:
        parser.print_help()
        return 0

    logger.info(f"Career Match v{__version__} running '{parsed.command}'")

    try:
        if parsed.command == "catalog":
            return _run_catalog(parsed)
        if parsed.command == "normalize":
            return _run_normalize(parsed)
        if parsed.command == "recommend":
            return _run_recommend(parsed, settings)
    except (FileNotFoundError, ValueError) as e:
        # ValidationError and ProfileDataError are both ValueErrors.
        kind = "Invalid data" if isinstance(e, ValidationError) else "Error"
        print(f"{kind}: {e}", file=sys.stderr)
        return 1

    return 0


def _load_catalog(path: Path | None):
    from career_match.scoring.catalog import CareerCatalog
    from career_match.scoring.config import get_scoring_config

    catalog_path = path or get_scoring_config().catalog_path
    if catalog_path is None:
        return CareerCatalog.default()
    return CareerCatalog.load(catalog_path)


def _run_catalog(parsed: argparse.Namespace) -> int:
    catalog = _load_catalog(parsed.catalog)
    if not catalog:
        print("Catalog is empty.")
        return 0

    for career in catalog:
        print(
            f"- {career.title} ({career.industry}, demand={career.demand_level.value}, "
            f"salary={career.average_salary or 'n/a'})"
        )
    return 0


def _run_normalize(parsed: argparse.Namespace) -> int:
    from career_match.scoring.normalizer import normalize
    from career_match.scoring.profile import ProfileService

    profile = ProfileService().load_profile(parsed.profile)
    now = parsed.now or datetime.now(UTC).date()

    features = normalize(profile, now)
    print(json.dumps(features.to_dict(), indent=2))
    return 0


def _run_recommend(parsed: argparse.Namespace, settings: Settings) -> int:
    from career_match.scoring.profile import ProfileService
    from career_match.scoring.service import CareerMatchingService, sort_by_salary

    profile_service = ProfileService()
    profile = profile_service.load_profile(parsed.profile)
    for warning in profile_service.validate_profile(profile):
        print(f"Warning: {warning}", file=sys.stderr)

    now = parsed.now or datetime.now(UTC).date()
    service = CareerMatchingService(catalog=_load_catalog(parsed.catalog))
    careers = service.recommend(profile, now)

    sort_order = SortOrder(parsed.sort) if parsed.sort else settings.sort_order
    if sort_order == SortOrder.SALARY:
        careers = sort_by_salary(careers)

    print(service.format_result(careers))

    run_dir = _resolve_run_dir(
        settings,
        prefix="recommend",
        out_run_dir=parsed.out_run_dir,
    )
    _write_json(
        run_dir / "recommendations.json",
        {
            "profile_name": profile.name,
            "reference_date": now.isoformat(),
            "sort_order": sort_order.value,
            "careers": careers,
        },
    )
    print(f"Wrote: {run_dir / 'recommendations.json'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
