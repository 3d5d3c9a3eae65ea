#!/usr/bin/env python3
"""
CLI tool for browsing the recipe collection from the command line.
Usage: python tools/query_cli.py --difficulty Easy --sort time
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from recipe_companion.core.data import DIFFICULTY_LEVELS, RECIPES
from recipe_companion.core.filters import search_recipes
from recipe_companion.core.query import select_recipes
from recipe_companion.core.rendering import build_cards, render_recipes
from recipe_companion.core.sorting import SORTABLE_PROPERTIES


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Filter, sort and search the recipe collection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python tools/query_cli.py --difficulty Easy --sort time
  python tools/query_cli.py --max-time 20
  python tools/query_cli.py -s chicken --format json
  python tools/query_cli.py --cuisine Italian --format html
        """
    )
    
    parser.add_argument(
        "-d", "--difficulty",
        type=str,
        choices=DIFFICULTY_LEVELS,
        help="Only show recipes of this difficulty"
    )
    
    parser.add_argument(
        "-t", "--max-time",
        type=int,
        help="Only show recipes taking at most this many minutes"
    )
    
    parser.add_argument(
        "-c", "--cuisine",
        type=str,
        help="Only show recipes of this cuisine"
    )
    
    parser.add_argument(
        "--sort",
        type=str,
        choices=SORTABLE_PROPERTIES,
        default="name",
        help="Attribute to sort by (default: name)"
    )
    
    parser.add_argument(
        "-s", "--search",
        type=str,
        help="Only show recipes whose name or ingredients contain this text"
    )
    
    parser.add_argument(
        "-f", "--format",
        type=str,
        choices=["text", "json", "html"],
        default="text",
        help="Output format (default: text)"
    )
    
    return parser.parse_args(argv)


def format_recipe(card):
    """Format a recipe card for display."""
    output = []
    output.append(f"\n{'='*60}")
    output.append(f"  {card.name}")
    output.append(f"  {card.cuisine} | {card.difficulty} | {card.time} min")
    output.append(f"{'='*60}")
    
    output.append(f"\n  Ingredients: {', '.join(card.ingredients)}")
    output.append(f"\n  Instructions:")
    output.append(f"  {card.instructions}")
    
    return "\n".join(output)


def main(argv=None):
    """Main CLI entry point."""
    args = parse_args(argv)
    
    options = {
        "difficulty": args.difficulty,
        "max_time": args.max_time,
        "cuisine": args.cuisine,
        "sort_property": args.sort
    }
    
    try:
        recipes = select_recipes(RECIPES, options)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    
    if args.search is not None:
        matches = search_recipes(args.search)
        recipes = [r for r in recipes if matches(r)]
    
    if args.format == "html":
        print(render_recipes(recipes))
        return
    
    cards = build_cards(recipes)
    
    if args.format == "json":
        print(json.dumps({
            "total": len(cards),
            "recipes": [card.model_dump() for card in cards]
        }, indent=2, ensure_ascii=False))
    elif not cards:
        print("No matching recipes found.")
    else:
        print(f"Found {len(cards)} recipes:")
        for card in cards:
            print(format_recipe(card))


if __name__ == "__main__":
    main()
