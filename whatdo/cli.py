#!/usr/bin/env python3
"""
WHATDO - CLI Interface
======================
The CLI for when you can't decide what to do next.

Usage:
    whatdo                      Pick a task (same as `whatdo pick`)
    whatdo add read run "call mom"
    whatdo drop run
    whatdo list
    whatdo shuffle
    whatdo clear
    whatdo path
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Settings
from .errors import StoreError
from .store import ListStore

logger = logging.getLogger("whatdo")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="whatdo",
        description="The CLI for when you can't decide what to do next.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  whatdo add read run "call mom"   Add tasks to the queue
  whatdo                           Pick a random task
  whatdo drop run                  Remove a task
  whatdo list                      Show all tasks
  whatdo shuffle                   Start a fresh cycle
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-f", "--file", type=Path, help="List file (overrides WHATDO_LIST_PATH)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # PICK command
    subparsers.add_parser("pick", help="Pick and display a random task from the queue")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add tasks to the queue")
    add_parser.add_argument("tasks", nargs="+", help="Tasks to add")

    # DROP command
    drop_parser = subparsers.add_parser("drop", help="Remove tasks from the queue by name")
    drop_parser.add_argument("tasks", nargs="+", help="Tasks to remove")

    # LIST command
    subparsers.add_parser("list", help="Show all tasks")

    # CLEAR command
    subparsers.add_parser("clear", help="Clear all tasks from the queue")

    # PATH command
    subparsers.add_parser("path", help="Show the path to the list file")

    # SHUFFLE command
    subparsers.add_parser(
        "shuffle",
        help="Reshuffle the queue (done automatically after every task was picked)"
    )

    return parser


def resolve_log_level(settings: Settings, verbose: int) -> int:
    """-v/-vv win over WHATDO_LOG_LEVEL; unknown names fall back to WARNING"""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.getLevelNamesMapping().get(settings.log_level, logging.WARNING)


def _configure_logging(settings: Settings, verbose: int) -> None:
    logging.basicConfig(
        level=resolve_log_level(settings, verbose),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    _configure_logging(settings, args.verbose)

    list_path = args.file.expanduser() if args.file else settings.list_path
    store = ListStore(list_path)
    command = args.command or "pick"

    if command == "path":
        print(store.path)
        return 0

    try:
        dolist = store.load()
    except StoreError as e:
        print(e, file=sys.stderr)
        return 1

    status = 0

    # Execute command
    if command == "pick":
        task = dolist.pick()
        if task is None:
            print("whatdo had error: list is empty", file=sys.stderr)
            status = 1
        else:
            print(task)

    elif command == "add":
        added, errors = dolist.add_many(args.tasks)
        for error in errors:
            print(error, file=sys.stderr)
        if added:
            print(f"whatdo: added {len(added)} task(s)")
        status = 1 if errors else 0

    elif command == "drop":
        removed, errors = dolist.drop_many(args.tasks)
        for task in removed:
            print(f'whatdo: removed "{task}"')
        for error in errors:
            print(error, file=sys.stderr)
        status = 1 if errors else 0

    elif command == "list":
        print(dolist.render() if len(dolist) else "(List is empty)")

    elif command == "clear":
        dolist.clear()
        print("whatdo: cleared all items")

    elif command == "shuffle":
        dolist.shuffle()
        print("whatdo: reshuffled queue")

    try:
        store.save(dolist)
    except StoreError as e:
        print(e, file=sys.stderr)
        return 1

    return status


if __name__ == "__main__":
    sys.exit(main())
