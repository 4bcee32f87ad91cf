#!/usr/bin/env python3
"""
Campus Walking Router - Command Line Interface

Route between two campus places typed as free text.
"""

import argparse
import logging
import sys

from .algorithms import CampusNavigator
from .config import RoutingConfig
from .data import load_path_features, load_place_catalog
from .mapping import build_graph


def main(argv=None):
    """
    Route between two place queries and print the result.
    """
    parser = argparse.ArgumentParser(description="Campus walking router")
    parser.add_argument("start", help="Start place, e.g. 'library'")
    parser.add_argument("end", help="Destination place, e.g. 'fine arts'")
    parser.add_argument("--paths", default=None, help="GeoJSON file of campus paths")
    parser.add_argument("--places", default=None, help="JSON file of named places")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s - %(levelname)s - %(message)s'
    )

    print("Campus Walking Router")
    print("=" * 50)

    config = RoutingConfig(paths_data_path=args.paths, places_data_path=args.places)

    try:
        features = load_path_features(config.paths_data_path)
        catalog = load_place_catalog(config.places_data_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading campus data: {e}")
        return 1

    graph = build_graph(features, config)
    print(f"Network: {graph.node_count} nodes, {graph.edge_count} edges, {len(catalog)} places")

    navigator = CampusNavigator(graph, catalog, config)

    for label, query in (("Start", args.start), ("End", args.end)):
        suggestions = navigator.suggest(query)
        names = ", ".join(p.display_name for p in suggestions) or "none"
        print(f"{label} '{query}' matches: {names}")

    try:
        result = navigator.route_between_places(args.start, args.end)
    except ValueError as e:
        print(f"Error calculating route: {e}")
        return 1

    summary = result.get_summary()
    print(f"\nFrom: {summary['start_place']}")
    print(f"To:   {summary['end_place']}")
    print(result.message)

    if result.found:
        print(f"   Nodes: {summary['node_count']}")
        print(f"   Walking time: {summary['walking_time_s'] / 60:.1f} min")
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
