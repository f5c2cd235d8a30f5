"""
Cleaner Service - Main Entry Point

This is the command-line interface for the cleaner service.
It reads a raw ``Uncleaned_DS_jobs`` CSV export, cleans every record and
writes the feature-enriched table to a new CSV file.

Usage:
    python -m ds_jobs.cleaner.main --input PATH --output PATH [OPTIONS]

Options:
    --input PATH          Raw CSV export to clean
    --output PATH         Destination CSV for cleaned records
    --config PATH         Cleaner configuration (default: bundled cleaner.yml)
    --current-year INT    Reference year for company_age (default: now)
    --on-error MODE       What to do with failed records: skip, null-fill, abort
    --limit INTEGER       Maximum number of records to process
    --dry-run             Clean records without writing the output file
    --verbose             Enable debug logging
    --help                Show this message and exit

Environment:
    CLEANER_CONFIG_PATH   Default for --config
    CLEANER_CURRENT_YEAR  Default for --current-year

Examples:
    # Clean the Glassdoor export, dropping records that fail to parse:
    python -m ds_jobs.cleaner.main --input Uncleaned_DS_jobs.csv --output Cleaned_DS_Jobs.csv

    # Keep failed records with empty salary/founded fields:
    python -m ds_jobs.cleaner.main --input raw.csv --output clean.csv --on-error null-fill

Exit Codes:
    0: Success
    1: Cleaning errors occurred (some records failed)
    2: Fatal error (unreadable input, invalid configuration, etc.)
"""

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

from dotenv import load_dotenv

from .config_loader import CleanerConfig, load_cleaner_config
from .file_operations import FileOperationError, read_raw_jobs, write_cleaned_jobs
from .transform import output_columns, transform_records

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

ON_ERROR_MODES = ('skip', 'null-fill', 'abort')


class RecordAbortError(Exception):
    """Raised when a record fails and the run was asked to abort on errors."""
    pass


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Clean raw DS job postings into a feature-enriched table',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        '--input',
        type=str,
        required=True,
        help='Raw CSV export to clean',
        dest='input_path'
    )

    parser.add_argument(
        '--output',
        type=str,
        required=True,
        help='Destination CSV for cleaned records',
        dest='output_path'
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Path to cleaner.yml',
        default=os.getenv('CLEANER_CONFIG_PATH'),
        dest='config_path'
    )

    parser.add_argument(
        '--current-year',
        type=int,
        help='Reference year for company_age (default: current year)',
        default=_env_int('CLEANER_CURRENT_YEAR'),
        dest='current_year'
    )

    parser.add_argument(
        '--on-error',
        choices=ON_ERROR_MODES,
        help='What to do with records that fail to clean (default: skip)',
        default='skip',
        dest='on_error'
    )

    parser.add_argument(
        '--limit',
        type=int,
        help='Maximum number of records to process',
        default=None
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Clean records without writing the output file',
        dest='dry_run'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}", extra={'value': value})
        return None


def run_cleaner(
    input_path: str,
    output_path: str,
    config: CleanerConfig,
    on_error: str = 'skip',
    limit: Optional[int] = None,
    dry_run: bool = False
) -> dict[str, int]:
    """
    Main cleaner logic.

    Args:
        input_path: Raw CSV export to clean
        output_path: Destination CSV for cleaned records
        config: Cleaner configuration
        on_error: 'skip' drops failed records, 'null-fill' keeps them with
            empty failed fields, 'abort' stops at the first failure
        limit: Maximum number of records to process
        dry_run: If True, don't write the output file

    Returns:
        Dictionary with statistics:
        - read: Number of raw records read
        - cleaned: Number cleaned without errors
        - failed: Number with at least one failed field
        - skipped: Number of failed records left out of the output
        - written: Number written to the output file

    Raises:
        FileOperationError: If the input cannot be read or output written
        RecordAbortError: If on_error is 'abort' and a record fails
    """
    if on_error not in ON_ERROR_MODES:
        raise ValueError(f"on_error must be one of {ON_ERROR_MODES}, got {on_error!r}")

    stats = {
        'read': 0,
        'cleaned': 0,
        'failed': 0,
        'skipped': 0,
        'written': 0,
    }

    start_time = datetime.now(timezone.utc)

    logger.info(
        "Starting cleaner service",
        extra={
            'input_path': input_path,
            'output_path': output_path,
            'on_error': on_error,
            'limit': limit,
            'dry_run': dry_run,
        }
    )

    raw_jobs = read_raw_jobs(input_path, limit=limit)
    stats['read'] = len(raw_jobs)

    if not raw_jobs:
        logger.warning("No raw jobs found to process")

    cleaned_jobs = []
    for result in transform_records(raw_jobs, config):
        if result.ok:
            stats['cleaned'] += 1
            cleaned_jobs.append(result.record)
            continue

        stats['failed'] += 1
        for error in result.errors:
            logger.warning(
                "Failed to clean job posting",
                extra={
                    'record_id': error.record_id,
                    'field': error.field,
                    'raw_value': error.raw_value,
                    'error': error.message,
                }
            )

        if on_error == 'abort':
            first = result.errors[0]
            raise RecordAbortError(
                f"Record {first.record_id!r} failed on {first.field}: {first.message}"
            )
        if on_error == 'null-fill' and result.record:
            cleaned_jobs.append(result.record)
        else:
            stats['skipped'] += 1

    # Write output file (unless dry run); a header-only file replaces any
    # previous output when nothing was cleaned.
    if dry_run:
        logger.info(f"DRY RUN: Would write {len(cleaned_jobs)} cleaned jobs")
    else:
        logger.info(f"Writing {len(cleaned_jobs)} cleaned jobs to {output_path}")
        stats['written'] = write_cleaned_jobs(output_path, cleaned_jobs, output_columns(config))

    duration = (datetime.now(timezone.utc) - start_time).total_seconds()

    logger.info(
        "Cleaner service completed",
        extra={
            'duration_seconds': duration,
            **stats,
        }
    )

    return stats


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the cleaner service.

    Returns:
        Exit code (0 = success, 1 = partial failure, 2 = fatal error)
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    try:
        config = load_cleaner_config(args.config_path)
        if args.current_year is not None:
            config.current_year = args.current_year

        stats = run_cleaner(
            input_path=args.input_path,
            output_path=args.output_path,
            config=config,
            on_error=args.on_error,
            limit=args.limit,
            dry_run=args.dry_run
        )

        if stats['failed'] > 0:
            logger.warning(
                f"Completed with errors: {stats['failed']} failed, {stats['skipped']} skipped"
            )
            return 1  # Partial failure

        if stats['cleaned'] == 0:
            logger.warning("No jobs were cleaned")
            return 0

        logger.info("Cleaner completed successfully")
        return 0

    except (FileNotFoundError, ValueError, FileOperationError) as e:
        logger.error(f"Fatal error: {e}")
        return 2

    except RecordAbortError as e:
        logger.error(f"Aborted: {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # Standard Unix exit code for SIGINT


if __name__ == '__main__':
    sys.exit(main())
