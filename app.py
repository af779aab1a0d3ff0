"""
Command line entry point for SEO Analyzer
"""
import argparse
import json
import logging
import sys

import uvicorn

from config import config
from monitoring import setup_logging
from seo_scraper import SEOAnalyzer
from utils import AnalysisError, RequestValidationError

logger = logging.getLogger(__name__)


def create_cli():
    """Create command line interface"""
    parser = argparse.ArgumentParser(description="SEO Analyzer - on-page and off-page SEO rating for a URL")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze URL command
    url_parser = subparsers.add_parser("analyze-url", help="Analyze a single URL")
    url_parser.add_argument("url", help="URL to analyze")

    # Server mode
    server_parser = subparsers.add_parser("server", help="Run the HTTP API")
    server_parser.add_argument("--host", default=config.host, help="Bind address")
    server_parser.add_argument("--port", type=int, default=config.port, help="Server port")

    return parser


def main(argv=None) -> int:
    """Main application entry point"""
    parser = create_cli()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(config.log_level, config.log_dir)
    config.warn_missing_credentials()

    if args.command == "server":
        uvicorn.run("api:app", host=args.host, port=args.port, log_level=config.log_level.lower())
        return 0

    analyzer = SEOAnalyzer(config)
    try:
        report = analyzer.analyze_url(args.url)
    except RequestValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except AnalysisError as e:
        logger.error(f"Application error: {e}")
        print("Error: Failed to fetch SEO data", file=sys.stderr)
        return 1

    print(json.dumps(report.to_dict(), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
