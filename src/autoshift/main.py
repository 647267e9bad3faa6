"""
Main entry point for the shift generation application.
"""

import sys
import argparse

from .config import ConfigLoader, ConfigurationError, InvalidDateFormatError
from .coverage import CoverageEvaluator, shifts_on
from .generator import ScheduleGenerator
from .reporter import ScheduleReporter
from .timeutils import parse_date, week_dates


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autoshift",
        description="Generate employee shifts from availability and check staffing coverage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate one day
  autoshift config/schedule.yaml --date 2026-01-05

  # Generate a full week starting at planning.start_date
  autoshift config/schedule.yaml --week

  # Check coverage of the shifts already listed in the config
  autoshift config/schedule.yaml --week --evaluate-only
        """,
    )

    parser.add_argument("config", type=str, help="Path to YAML configuration file")
    parser.add_argument(
        "--date",
        type=str,
        help="Target date (YYYY-MM-DD); defaults to planning.start_date",
    )
    parser.add_argument(
        "--week",
        action="store_true",
        help="Cover seven consecutive days starting at the target date",
    )
    parser.add_argument(
        "--evaluate-only",
        action="store_true",
        help="Evaluate the config's persisted shifts instead of generating new ones",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress detailed output (only show the schedule)",
    )
    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    try:
        # Load configuration
        print(f"Loading configuration from: {args.config}")
        loader = ConfigLoader(args.config)
        config = loader.load()

        print("✓ Configuration loaded successfully")
        print(loader.get_summary())
        print()

        if args.date is not None:
            start = parse_date(args.date)
        elif config.start_date is not None:
            start = config.start_date
        else:
            raise ConfigurationError(
                "No target date: pass --date or set planning.start_date"
            )

        days = week_dates(start) if args.week else [start]

        if args.evaluate_only:
            shifts = [shift for day in days for shift in shifts_on(day, config.shifts)]
        else:
            print("Generating shifts...")
            generator = ScheduleGenerator(config.settings)
            shifts = []
            for day in days:
                shifts.extend(generator.generate_day(day, config.employees))
            print(f"✓ Generated {len(shifts)} shifts")
            print()

        evaluator = CoverageEvaluator(config.settings)
        coverage = {day: evaluator.evaluate(day, shifts_on(day, shifts)) for day in days}

        reporter = ScheduleReporter(shifts, coverage, config.settings)
        reporter.print_report(args.quiet)

        # Exit with appropriate code
        sys.exit(1 if reporter.critical_days else 0)

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except InvalidDateFormatError as e:
        print(f"Date Format Error: {e}", file=sys.stderr)
        print(
            "\n Tip: Use ISO 8601 format (YYYY-MM-DD) for all dates.", file=sys.stderr
        )
        print("   Example: 2026-01-05", file=sys.stderr)
        sys.exit(1)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Unexpected Error: {e}", file=sys.stderr)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
