#!/usr/bin/env python3
"""IP Log - Entry point"""

import argparse
import sys
import time

from rich.console import Console

from iplog import VERSION, LogAggregator, IpLogError, RunReport, print_error, print_report, write_results
from iplog.config import OPTION_NAMES, build_run_options, load_config, merge_options
from iplog.log import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="IP Log - count hits per IP address inside a time window and subnet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Dates are accepted as dd.MM.yyyy or yyyy.MM.dd.\n"
               "Each log line must look like <ip>:<date>."
    )

    parser.add_argument("-l", "--file-log", help="Path to the log file")
    parser.add_argument("-o", "--file-output", help="Path to the result file")
    parser.add_argument("-s", "--address-start",
                        help="Subnet start address (default: all addresses)")
    parser.add_argument("-m", "--address-mask",
                        help="Subnet mask, requires --address-start (default: 0.0.0.0)")
    parser.add_argument("--time-start", help="First day of the time window")
    parser.add_argument("--time-end", help="Last day of the time window")
    parser.add_argument("-c", "--config", help="JSON file with option defaults")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"IP Log v{VERSION}")
    return parser


def run(args: argparse.Namespace, console: Console) -> RunReport:
    started = time.perf_counter()

    config = load_config(args.config) if args.config else {}
    cli = {name: getattr(args, name.replace('-', '_')) for name in OPTION_NAMES}
    options = build_run_options(merge_options(cli, config))

    aggregator = LogAggregator(console=console)
    result = aggregator.analyze_file(
        options.file_log, options.time_range, options.address_filter
    ).unwrap()

    write_results(result, options.file_output)
    elapsed_ms = int((time.perf_counter() - started) * 1000)

    return RunReport(
        time_range=options.time_range,
        address_filter=options.address_filter,
        matches=len(result),
        elapsed_ms=elapsed_ms,
        output_path=options.file_output,
    )


def main(argv=None, console=None):
    args = build_parser().parse_args(argv)
    console = console or Console()
    setup_logging(args.verbose, console)

    try:
        report = run(args, console)
    except IpLogError as e:
        print_error(e, console)
        sys.exit(1)

    print_report(report, console)


if __name__ == "__main__":
    main()
