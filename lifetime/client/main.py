"""Command-line client for browsing and running the pattern demos."""

import argparse
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from lifetime.config import get, load_config
from lifetime.core import CATEGORIES
from lifetime.core.pattern_loader import DemoLoader
from lifetime.core.pattern_system import registry

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False):
    """Configure file and console logging from the loaded configuration."""
    log_file = get("logging.file")
    log_level = "DEBUG" if verbose else get("logging.level", "INFO")

    handlers = [logging.StreamHandler()]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        # Time-based rotating file handler (keep logs for 24 hours)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when='midnight',
            interval=1,
            backupCount=1
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.insert(0, file_handler)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def print_separator(title=""):
    """Print a visual separator."""
    if title:
        print(f"\n{'='*60}")
        print(f"  {title}")
        print(f"{'='*60}")
    else:
        print(f"{'='*60}\n")


def load_catalog(demos_config: str) -> bool:
    """Load every enabled demo into the global registry."""
    registry.clear()
    loader = DemoLoader(demos_config)
    return loader.load_all_demos()


def list_demos(category: Optional[str] = None):
    """Print the catalog grouped by category."""
    categories = [category] if category else list(CATEGORIES)

    for name in categories:
        demos = registry.get_by_category(name)
        print_separator(f"{name.title()} patterns ({len(demos)})")
        for demo in demos:
            print(f"  {demo.name:<26} {demo.display_name}")
    print()


def show_info(demo_name: str) -> int:
    """Print description, participants and settings of one demo."""
    demo = registry.get(demo_name)
    if demo is None:
        print(f"❌ Unknown demo: {demo_name}")
        return 1

    print_separator(f"{demo.display_name} Pattern")
    print(f"Category: {demo.category}")
    print(f"Version:  {demo.version}\n")
    print(f"{demo.description}.\n")

    if demo.participants:
        print("Participants:")
        for role, classes in demo.participants.items():
            print(f"  • {role}: {', '.join(classes)}")
        print()

    schema = demo.get_config_schema()
    if schema:
        print("Settings:")
        for key, spec in schema.items():
            print(f"  • {key} ({spec.get('type', 'any')}) = {demo.setting(key)!r}")
            if spec.get('description'):
                print(f"    {spec['description']}")
        print()

    return 0


def run_demos(names: List[str]) -> int:
    """Run the named demos in the given order."""
    unknown = [name for name in names if registry.get(name) is None]
    if unknown:
        print(f"❌ Unknown demo(s): {', '.join(unknown)}")
        print("Use 'list' to see the available demos.")
        return 1

    for name in names:
        registry.run(name)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifetime",
        description="Run the Gang-of-Four design pattern demos",
    )
    parser.add_argument("--config", help="Path to config.yaml")
    parser.add_argument("--demos-config", help="Path to demos_config.yaml")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    list_parser = subparsers.add_parser("list", help="List available demos")
    list_parser.add_argument("--category", "-c", choices=CATEGORIES, help="Only one category")

    info_parser = subparsers.add_parser("info", help="Describe a demo")
    info_parser.add_argument("name", help="Demo name (see 'list')")

    run_parser = subparsers.add_parser("run", help="Run one or more demos")
    run_parser.add_argument("names", nargs="*", help="Demo names (see 'list')")
    group = run_parser.add_mutually_exclusive_group()
    group.add_argument("--all", "-a", action="store_true", help="Run every enabled demo")
    group.add_argument("--category", "-c", choices=CATEGORIES, help="Run one category")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the pattern catalog client."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "run" and args.names and (args.all or args.category):
        parser.error("demo names cannot be combined with --all or --category")

    # Nothing runs by default
    if args.command is None:
        parser.print_help()
        return 0

    try:
        load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1

    setup_logging(args.verbose)

    demos_config = args.demos_config or get("catalog.demos_config", "demos_config.yaml")
    if not load_catalog(demos_config):
        logger.error("Some demos failed to load")
        print("❌ Some demos failed to load")
        return 1

    if args.command == "list":
        list_demos(args.category)
        return 0

    if args.command == "info":
        return show_info(args.name)

    if args.all:
        names = [demo.name for demo in registry.get_enabled()]
    elif args.category:
        names = [demo.name for demo in registry.get_by_category(args.category)]
    else:
        names = args.names

    if not names:
        print("Nothing to run: name a demo, or use --all / --category")
        return 1

    try:
        return run_demos(names)
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        print(f"\n❌ Demo failed: {e}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
