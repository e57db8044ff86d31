#!/usr/bin/env python3
"""
CSS Pattern Matcher
Command-line entry point: turn a style request into CSS declarations.

    python main.py "make this button blue"
    python main.py --context '<button class="btn">' "rounded corners"
    python main.py --stats
"""

import argparse
import json
import logging
import sys

from core.element_context import ElementContext
from core.pattern_library import PatternLibrary
from utils.config import ConfigError, MatcherSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Match a natural-language style request to CSS patterns.")
    parser.add_argument('prompt', nargs='?', help="Style request, e.g. \"make this blue\"")
    parser.add_argument('--context', help="HTML of the target element, e.g. '<button class=\"btn\">'")
    parser.add_argument('--threshold', type=int, help="Confidence needed to apply a pattern (0-100)")
    parser.add_argument('--stats', action='store_true', help="Print pattern counts per category")
    parser.add_argument('--clear-cache', action='store_true', help="Remove all cached results")
    parser.add_argument('--no-cache', action='store_true', help="Match without the result cache")
    return parser


def main(argv=None) -> int:
    """Main execution function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = MatcherSettings.from_environment()
        overrides = {}
        if args.threshold is not None:
            overrides['confidence_threshold'] = args.threshold
        if args.no_cache:
            overrides['cache_enabled'] = False
        if overrides:
            settings = MatcherSettings(**{**settings.model_dump(), **overrides})
    except (ConfigError, ValueError) as e:
        parser.error(str(e))

    logging.basicConfig(level=settings.log_level,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    library = PatternLibrary.from_settings(settings)

    if args.clear_cache:
        removed = library.clear_cache()
        print(f"Cleared {removed} cached results")

    if args.stats:
        print(json.dumps({
            'categories': library.get_category_counts(),
            'total': library.get_pattern_count(),
        }, indent=2))

    if args.prompt is None:
        if not (args.stats or args.clear_cache):
            parser.error("a prompt is required unless --stats or --clear-cache is given")
        return 0

    context = ElementContext.from_markup(args.context) if args.context else None
    result = library.match(args.prompt, context)
    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
