#!/usr/bin/env python3
"""
Web Performance Analyzer - measure and classify page and API performance.

Times a single request against a web page or an API endpoint, estimates
the sub-resources a page references, and reports a performance tier.

Usage:
    python -m perf_analyzer.main --url https://example.com
    python -m perf_analyzer.main --url https://httpbin.org/get --api
    python -m perf_analyzer.main --endpoint cat-fact
    python -m perf_analyzer.main --list-endpoints --category Testing
"""

import argparse
import asyncio
import json
import logging
import random
import sys
from contextlib import nullcontext

from perf_analyzer.endpoints import API_CATEGORIES, filter_endpoints, get_endpoint
from perf_analyzer.engine import PerformanceAnalyzer
from perf_analyzer.engine.fetcher import HttpClient
from perf_analyzer.errors import PerformanceAnalyzerError
from perf_analyzer.report import render_endpoints, render_report
from perf_analyzer.utils.config import load_thresholds
from perf_analyzer.utils.constants import DEFAULT_TIMEOUT
from perf_analyzer.utils.log import (
    create_status,
    setup_logger,
    print_error,
    print_info,
)
from perf_analyzer.utils.urls import ensure_scheme


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='perf-analyzer',
        description='Measure and classify web page and API performance',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --url https://example.com
    %(prog)s --url https://httpbin.org/get --api
    %(prog)s --endpoint jsonplaceholder-posts --json
    %(prog)s --list-endpoints --category Entertainment
        """
    )

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        '--url', '-u',
        type=str,
        help='URL of the page or API endpoint to analyze'
    )
    target.add_argument(
        '--endpoint', '-e',
        type=str,
        help='ID of a sample API endpoint to analyze (implies --api)'
    )
    target.add_argument(
        '--list-endpoints',
        action='store_true',
        help='List the sample API endpoints and exit'
    )

    parser.add_argument(
        '--api',
        action='store_true',
        help='Analyze the URL as a single API endpoint instead of a page'
    )

    parser.add_argument(
        '--category',
        type=str,
        default='All',
        help=f"Endpoint category for --list-endpoints ({', '.join(API_CATEGORIES)})"
    )

    parser.add_argument(
        '--relay',
        action='store_true',
        help='Retrieve pages through the content relay service'
    )

    parser.add_argument(
        '--thresholds',
        type=str,
        default=None,
        help='JSON file overriding the scoring thresholds'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f'Request timeout in seconds (default: {DEFAULT_TIMEOUT})'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for estimated and simulated figures'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress output except errors and the result'
    )

    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """
    Main entry point for the analyzer.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    setup_logger(level=log_level)

    if args.list_endpoints:
        endpoints = filter_endpoints(args.category)
        if args.json:
            print(json.dumps([e.to_dict() for e in endpoints], indent=2))
        else:
            render_endpoints(endpoints)
        return 0

    try:
        api_mode = args.api
        if args.endpoint:
            endpoint = get_endpoint(args.endpoint)
            if endpoint is None:
                print_error(f"Unknown endpoint: {args.endpoint}")
                return 1
            url = endpoint.url
            api_mode = True
        else:
            url = ensure_scheme(args.url)

        thresholds = load_thresholds(args.thresholds)
        analyzer = PerformanceAnalyzer(
            http_client=HttpClient(timeout=args.timeout),
            thresholds=thresholds,
            rng=random.Random(args.seed),
            use_relay=args.relay,
        )

        mode = "API" if api_mode else "page"
        if not args.quiet and not args.json:
            print_info(f"Analyzing {mode}: {url}")

        spinner = nullcontext() if args.json or args.quiet else create_status(f"Measuring {url}...")
        with spinner:
            if api_mode:
                metrics = await analyzer.analyze_api(url)
            else:
                metrics = await analyzer.analyze_page(url)

        level = analyzer.classify(metrics)

        if args.json:
            print(json.dumps(
                {"metrics": metrics.to_dict(), "performanceLevel": level.value},
                indent=2
            ))
        else:
            render_report(metrics, level, thresholds)

        return 0

    except KeyboardInterrupt:
        print_error("\nAnalysis interrupted by user")
        return 1
    except PerformanceAnalyzerError as e:
        print_error(f"Analysis failed: {e}")
        return 1


def run() -> None:
    """Entry point wrapper for running as module."""
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
