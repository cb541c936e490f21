#!/usr/bin/env python3
"""
Signup/Login Service - Main Entry Point

Runs the Flask web application.

Usage:
    python main.py [--host HOST] [--port PORT] [--debug]
"""

import argparse
import logging

from config.settings import load_settings


def parse_args(argv=None, settings=None):
    settings = settings or load_settings()
    parser = argparse.ArgumentParser(description="Signup/Login Service")

    parser.add_argument("--host", default=settings['HOST'], help="Web app host")
    parser.add_argument("--port", type=int, default=settings['PORT'], help="Web app port (env PORT, default 3000)")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    return parser.parse_args(argv)


def main(argv=None):
    settings = load_settings()
    args = parse_args(argv, settings)

    logging.basicConfig(level=settings['LOG_LEVEL'], format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger = logging.getLogger("main")

    from webapp.app import create_app
    app = create_app()
    logger.info(f"Server is running on port {args.port}")
    logger.info(f"Debug mode: {'ON' if args.debug else 'OFF'}")
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
