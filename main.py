#!/usr/bin/env python3
"""
Invoice Harvest - Main Entry Point.

Downloads the configured invoice PDFs, extracts their labeled fields and
writes one CSV file per invoice. Provides both a command-line interface
and programmatic access to the pipeline.

Usage:
    Command Line:
        python main.py
        python main.py --source https://example.com/invoice.pdf --output-dir ./results/
        python main.py --sources-file urls.txt --excel

    Python:
        from main import run_harvest
        summary = run_harvest(["https://example.com/invoice.pdf"])

Author: ML Engineering Team
Version: 1.0.0
"""

import argparse
import logging
import sys
from typing import Optional, List

from config import ConfigurationManager
from invoice_harvest.utils.logger import setup_logger_from_config, get_logger
from invoice_harvest.utils.helpers import read_source_list
from invoice_harvest.utils.exceptions import ExcelExportError


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list. Defaults to sys.argv[1:].

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Invoice Harvest - download invoices and extract their fields to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Process the sources listed in config/settings.yaml:
        python main.py

    Process specific documents:
        python main.py --source https://example.com/a.pdf --source https://example.com/b.pdf

    Read sources from a file and add an Excel summary:
        python main.py --sources-file urls.txt --excel
        """
    )

    # Input options
    parser.add_argument(
        "--source", "-s",
        action="append",
        default=None,
        metavar="URL",
        help="Source document URL (repeatable, overrides configured sources)"
    )

    parser.add_argument(
        "--sources-file", "-f",
        type=str,
        default=None,
        help="Text file with one source URL per line"
    )

    # Output options
    parser.add_argument(
        "--download-dir",
        type=str,
        default=None,
        help="Directory for downloaded documents"
    )

    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default=None,
        help="Directory for CSV output files"
    )

    parser.add_argument(
        "--excel",
        action="store_true",
        help="Also write a consolidated Excel workbook"
    )

    # Processing options
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP request timeout in seconds"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 if any document failed"
    )

    # Logging options
    parser.add_argument(
        "--hide-text",
        action="store_true",
        help="Log extracted document text at DEBUG level only"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize configuration, apply command-line overrides and set up logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)

    if args.download_dir:
        config.set("paths.download_dir", args.download_dir)
    if args.output_dir:
        config.set("paths.output_dir", args.output_dir)
    if args.timeout is not None:
        config.set("http.timeout", args.timeout)
    if args.excel:
        config.set("output.excel.enabled", True)
    if args.hide_text:
        config.set("logging.show_text", False)

    logger = setup_logger_from_config()

    if args.debug:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)
    elif args.quiet:
        logger.setLevel(logging.WARNING)

    logger.info("=" * 60)
    logger.info("INVOICE HARVEST")
    logger.info("=" * 60)
    logger.info(f"Version: {config.get('project.version', '1.0.0')}")
    logger.info(f"Output: {config.get('paths.output_dir')}")

    return config


def resolve_sources(args: argparse.Namespace, config: ConfigurationManager) -> List[str]:
    """
    Determine the source URLs for this run.

    Command-line sources take precedence over a sources file, which
    takes precedence over the configured list.

    Args:
        args: Parsed command-line arguments.
        config: Configuration manager.

    Returns:
        Ordered list of source URLs.
    """
    if args.source:
        return list(args.source)
    if args.sources_file:
        return read_source_list(args.sources_file)
    return list(config.get("sources", []))


def run_harvest(
    sources: Optional[List[str]] = None,
    config_path: Optional[str] = None,
    enable_excel: Optional[bool] = None
):
    """
    Run the invoice harvest pipeline.

    This is the main programmatic entry point. Per-document failures are
    reported in the returned summary, never raised.

    Args:
        sources: Source URLs. Defaults to the configured sources.
        config_path: Optional custom configuration file path. When given,
                     it replaces any configuration already loaded.
        enable_excel: Whether to write the Excel workbook. Defaults to
                      the output.excel.enabled setting.

    Returns:
        RunSummary with one outcome per source.

    Example:
        >>> summary = run_harvest(["https://example.com/invoice.pdf"])
        >>> for outcome in summary.outcomes:
        ...     print(outcome.csv_path or outcome.error)
    """
    logger = get_logger(__name__)
    if config_path is not None:
        ConfigurationManager.reset()
    config = ConfigurationManager(config_path)

    from invoice_harvest.pipeline import PipelineDriver
    from invoice_harvest.output_handler import ExcelExporter

    driver = PipelineDriver(sources=sources)
    summary = driver.run()

    if enable_excel is None:
        enable_excel = config.get("output.excel.enabled", False)

    if enable_excel and summary.total:
        try:
            summary.excel_path = ExcelExporter().export(summary)
        except ExcelExportError as e:
            logger.error(f"Excel summary not written: {e}")

    return summary


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code (0 for a completed run, non-zero for errors).
    """
    try:
        args = parse_arguments(argv)
        config = initialize_system(args)
        logger = get_logger(__name__)

        sources = resolve_sources(args, config)
        if not sources:
            logger.error("No source documents configured")
            return 1

        summary = run_harvest(sources=sources)

        logger.info("=" * 60)
        logger.info(
            f"Harvest complete: {summary.succeeded} succeeded, "
            f"{summary.failed} failed"
        )
        for outcome in summary.failures:
            logger.warning(f"  #{outcome.sequence_id} {outcome.location}: {outcome.error}")
        logger.info("=" * 60)

        if args.strict and summary.failed:
            return 2
        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
