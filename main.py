#!/usr/bin/env python3
"""
Record Teamwork Form Access - Main Entry Point
Checks, verifies and serves the form access configuration
"""

import argparse
import functools
import logging
import os
import sys

# Configuration
from teamwork_form.core.config import API_CONFIG, LOGGING_CONFIG

# Modular imports
from teamwork_form.core.form_access import FormAccessConfigError
from teamwork_form.core.loader import load_form_access
from teamwork_form.services.verifier import FormAccessVerifier
from teamwork_form.utils.helpers import (
    TEMPLATE_FORMATS,
    create_sample_config,
    describe_form_access,
    format_table,
)

# Setup logging
logging.basicConfig(
    level=getattr(logging, os.getenv(LOGGING_CONFIG['level_env'], LOGGING_CONFIG['default_level']).upper(),
                  logging.INFO),
    format=LOGGING_CONFIG['format']
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Record Teamwork form access configuration')
    parser.add_argument('mode', nargs='?', default='check', choices=['check', 'verify', 'template', 'api'],
                        help='Execution mode (default: check)')
    parser.add_argument('--config', type=str, help='Config file (.json, .env or .py); defaults to $FORM_ACCESS_CONFIG')
    parser.add_argument('--format', type=str, dest='fmt', default='json', choices=list(TEMPLATE_FORMATS),
                        help='Template format (template mode)')
    parser.add_argument('--output', type=str, help='Template output path (template mode)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    parser.add_argument('--host', type=str, default=API_CONFIG['host'], help='API server host (for api mode)')
    parser.add_argument('--port', type=int, default=API_CONFIG['port'], help='API server port (for api mode)')
    return parser


def run_check(config_path: str = None, online: bool = False) -> int:
    """Load the configuration, print it, and optionally verify it against the live form"""
    try:
        config = load_form_access(config_path)
    except FormAccessConfigError as e:
        logger.error(f"❌ {e}")
        for key, reason in e.problems.items():
            print(f"  ✗ {key}: {reason}")
        return 1

    print("📋 Form access configuration:")
    print(format_table(describe_form_access(config)))

    if not online:
        return 0

    logger.info("🌐 Verifying against the live form...")
    report = FormAccessVerifier(config).verify()

    if report.error:
        print(f"❌ Form page not usable: {report.error}")
    for key in report.found_fill_items:
        print(f"  ✓ {key} found on form")
    for key in report.missing_fill_items:
        print(f"  ✗ {key} not found on form")
    if report.unchecked_keys:
        print(f"  • Not checked (needs form design access): {', '.join(report.unchecked_keys)}")

    return 0 if report.ok else 1


def run_template(fmt: str, output: str = None) -> int:
    """Write a placeholder config file for the operator to fill in"""
    try:
        path = create_sample_config(output, fmt)
    except OSError as e:
        logger.error(f"❌ {e}")
        return 1

    print(f"📝 Fill in {path}, then run: python main.py check --config {path}")
    return 0


def run_api_server(config_path: str = None, host: str = API_CONFIG['host'], port: int = API_CONFIG['port']) -> int:
    """Run FastAPI status server"""
    import uvicorn
    from teamwork_form.api import create_app

    app = create_app(functools.partial(load_form_access, config_path))

    logger.info("🚀 Starting Record Teamwork Form Access API Server")
    logger.info(f"📍 Server: http://{host}:{port}")
    logger.info(f"📚 Docs: http://{host}:{port}/docs")
    logger.info("-" * 50)

    uvicorn.run(app, host=host, port=port)
    return 0


def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.mode == 'template':
        return run_template(args.fmt, args.output)
    if args.mode == 'api':
        return run_api_server(args.config, args.host, args.port)

    try:
        return run_check(args.config, online=args.mode == 'verify')
    except KeyboardInterrupt:
        logger.info("⏹️ Stopped")
        return 1


if __name__ == "__main__":
    sys.exit(main())
