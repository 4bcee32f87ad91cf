#!/usr/bin/env python3
"""
Startup script for the Campus Routing API server.

This script starts the FastAPI server with proper configuration.
"""

import argparse
import os

import uvicorn


def main():
    """Start the FastAPI server."""
    parser = argparse.ArgumentParser(description="Campus Routing API Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--paths", default=None, help="GeoJSON file of campus paths (sets CAMPUS_PATHS_FILE)")
    parser.add_argument("--places", default=None, help="JSON place catalog (sets CAMPUS_PLACES_FILE)")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"],
                        help="Log level")

    args = parser.parse_args()

    if args.paths:
        os.environ['CAMPUS_PATHS_FILE'] = os.path.abspath(args.paths)
    if args.places:
        os.environ['CAMPUS_PLACES_FILE'] = os.path.abspath(args.places)

    print("Starting Campus Routing API Server")
    print(f"URL: http://{args.host}:{args.port}")
    print(f"Documentation: http://{args.host}:{args.port}/docs")
    print(f"Health check: http://{args.host}:{args.port}/api/campus/health")
    print("-" * 50)

    # Ensure we're in the right directory
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    # Start the server
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        access_log=True
    )


if __name__ == "__main__":
    main()
