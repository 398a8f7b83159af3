"""Command-line interface for the note manager.

Usage:
    notes add -t "Title" [-b "Body"] [--tags a,b]
    notes list
    notes view <id>
    notes search <query>
    notes update <id> [-t "Title"] [-b "Body"] [--tags a,b]
    notes delete <id>
    notes tags
    notes filter --tags a,b
"""

from __future__ import annotations

import argparse
import logging

from pydantic import ValidationError

from note_manager import __version__
from note_manager.config import configure_logging, get_settings
from note_manager.display import (
    display_error,
    display_info,
    display_note,
    display_note_list,
    display_success,
)
from note_manager.models import CreateNoteOptions, UpdateNoteOptions
from note_manager.notes import NoteManager
from note_manager.storage import NoteStorage, StorageError
from note_manager.utils import parse_tags

logger = logging.getLogger("note_manager.cli")


def _add(args, manager: NoteManager) -> int:
    note = manager.create_note(
        CreateNoteOptions(title=args.title, body=args.body, tags=parse_tags(args.tags))
    )
    display_success(f"Note created with ID: {note.id}")
    return 0


def _list(args, manager: NoteManager) -> int:
    display_note_list(manager.list_notes())
    return 0


def _view(args, manager: NoteManager) -> int:
    note = manager.get_note(args.id)
    if note is None:
        display_error(f'Note with ID "{args.id}" not found')
        return 1
    display_note(note)
    return 0


def _search(args, manager: NoteManager) -> int:
    notes = manager.search_notes(args.query)
    if not notes:
        display_info(f'No notes found matching "{args.query}"')
    else:
        display_info(f'Found {len(notes)} note(s) matching "{args.query}"')
        display_note_list(notes)
    return 0


def _update(args, manager: NoteManager) -> int:
    # Empty option values count as "not provided" here; the core itself
    # accepts an explicit empty string.
    changes = {}
    if args.title:
        changes["title"] = args.title
    if args.body:
        changes["body"] = args.body
    if args.tags:
        changes["tags"] = parse_tags(args.tags)
    if not changes:
        display_error("Nothing to update: pass --title, --body or --tags")
        return 1

    note = manager.update_note(args.id, UpdateNoteOptions(**changes))
    if note is None:
        display_error(f'Note with ID "{args.id}" not found')
        return 1
    display_success(f"Note updated: {note.id}")
    return 0


def _delete(args, manager: NoteManager) -> int:
    if not manager.delete_note(args.id):
        display_error(f'Note with ID "{args.id}" not found')
        return 1
    display_success(f"Note deleted: {args.id}")
    return 0


def _tags(args, manager: NoteManager) -> int:
    tags = manager.get_all_tags()
    if not tags:
        display_info("No tags found.")
        return 0
    for tag in tags:
        print(tag)
    return 0


def _filter(args, manager: NoteManager) -> int:
    display_note_list(manager.filter_notes_by_tags(parse_tags(args.tags)))
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notes", description="A simple CLI note-taking application"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--file", help="Path to the notes JSON file (default: ~/.notes/notes.json)."
    )
    parser.set_defaults(func=None)

    subs = parser.add_subparsers(title="Commands")

    p_add = subs.add_parser("add", help="Create a new note")
    p_add.add_argument("-t", "--title", required=True, help="Note title")
    p_add.add_argument("-b", "--body", default="", help="Note body")
    p_add.add_argument("--tags", help="Comma-separated tags")
    p_add.set_defaults(func=_add)

    p_list = subs.add_parser("list", help="List all notes (most recent first)")
    p_list.set_defaults(func=_list)

    p_view = subs.add_parser("view", help="View a single note by ID")
    p_view.add_argument("id")
    p_view.set_defaults(func=_view)

    p_search = subs.add_parser("search", help="Search notes by title or body")
    p_search.add_argument("query")
    p_search.set_defaults(func=_search)

    p_update = subs.add_parser("update", help="Update a note's title, body or tags")
    p_update.add_argument("id")
    p_update.add_argument("-t", "--title", help="New title")
    p_update.add_argument("-b", "--body", help="New body")
    p_update.add_argument("--tags", help="Comma-separated tags, replacing the current ones")
    p_update.set_defaults(func=_update)

    p_delete = subs.add_parser("delete", help="Delete a note by ID")
    p_delete.add_argument("id")
    p_delete.set_defaults(func=_delete)

    p_tags = subs.add_parser("tags", help="List every tag in use")
    p_tags.set_defaults(func=_tags)

    p_filter = subs.add_parser("filter", help="List notes having all of the given tags")
    p_filter.add_argument("--tags", default="", help="Comma-separated tags")
    p_filter.set_defaults(func=_filter)

    return parser


def main(argv=None) -> int:
    """Runs the tool and returns its exit code.

    argv may be a list of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(argv)
    if not args.func:
        parser.print_help()
        return 1

    try:
        settings = get_settings()
    except ValidationError as exc:
        display_error(f"Invalid settings: {exc}")
        return 1
    configure_logging(settings.log_level)
    manager = NoteManager(NoteStorage(args.file or settings.notes_path))

    try:
        return args.func(args, manager)
    except StorageError as exc:
        logger.debug("Command failed", exc_info=True)
        display_error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
