"""
Note Manager MCP Server

Exposes the note manager as Model Context Protocol tools so an agent can
save, browse, search, edit and delete notes in the same JSON file the
``notes`` CLI uses. Runs with SSE transport on the configured port.
"""

import logging
from datetime import UTC, datetime

from mcp.server.fastmcp import FastMCP

from .config import configure_logging, get_settings
from .models import CreateNoteOptions, Note, UpdateNoteOptions
from .notes import NoteManager
from .storage import NoteStorage

logger = logging.getLogger("note_manager.server")

# ---------------------------------------------------------------------------
# MCP server + manager
# ---------------------------------------------------------------------------
settings = get_settings()
mcp = FastMCP("note-manager", host=settings.mcp_host, port=settings.mcp_port)
manager = NoteManager(NoteStorage(settings.notes_path))


def _dump(notes: list[Note]) -> dict:
    return {
        "count": len(notes),
        "notes": [n.model_dump(by_alias=True) for n in notes],
    }


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool()
def save_note(title: str, body: str = "", tags: list[str] | None = None) -> dict:
    """Save a new note with a title, body, and optional tags.

    Use this tool when the user wants to create, store, or remember a piece
    of information for later retrieval.

    Args:
        title: Short descriptive title for the note.
        body: The full text of the note.
        tags: Optional list of tags for categorisation.

    Returns:
        Dictionary with the generated note_id and a confirmation message.
    """
    note = manager.create_note(CreateNoteOptions(title=title, body=body, tags=tags))
    logger.info("Tool save_note invoked — id=%s", note.id)
    return {
        "note_id": note.id,
        "message": f"Note '{note.title}' saved successfully.",
    }


@mcp.tool()
def list_notes() -> dict:
    """List every stored note, most recently created first.

    Returns:
        Dictionary with the notes and their count.
    """
    notes = manager.list_notes()
    logger.info("Tool list_notes invoked — found=%d", len(notes))
    return _dump(notes)


@mcp.tool()
def get_note(note_id: str) -> dict:
    """Fetch a single note by its ID.

    Args:
        note_id: The ID returned by save_note.

    Returns:
        Dictionary with ``found`` and, when found, the note.
    """
    note = manager.get_note(note_id)
    logger.info("Tool get_note invoked — id=%s, found=%s", note_id, note is not None)
    if note is None:
        return {"found": False, "message": f"Note with ID '{note_id}' not found."}
    return {"found": True, "note": note.model_dump(by_alias=True)}


@mcp.tool()
def search_notes(query: str) -> dict:
    """Search notes by keyword (case-insensitive substring of title or body).

    Use this tool when the user wants to find notes related to a specific
    topic or keyword.

    Args:
        query: The search string to match against note titles and bodies.

    Returns:
        Dictionary with matching notes and their count.
    """
    results = manager.search_notes(query)
    logger.info("Tool search_notes invoked — query='%s', found=%d", query, len(results))
    return _dump(results)


@mcp.tool()
def update_note(
    note_id: str,
    title: str | None = None,
    body: str | None = None,
    tags: list[str] | None = None,
) -> dict:
    """Change the title, body or tags of an existing note.

    Only the arguments that are given are changed; the rest keep their
    current value.

    Args:
        note_id: The ID of the note to change.
        title: New title.
        body: New body.
        tags: New tag list, replacing the current one.

    Returns:
        Dictionary with ``found`` and, when found, the updated note.
    """
    changes = {
        k: v for k, v in {"title": title, "body": body, "tags": tags}.items() if v is not None
    }
    note = manager.update_note(note_id, UpdateNoteOptions(**changes))
    logger.info("Tool update_note invoked — id=%s, found=%s", note_id, note is not None)
    if note is None:
        return {"found": False, "message": f"Note with ID '{note_id}' not found."}
    return {"found": True, "note": note.model_dump(by_alias=True)}


@mcp.tool()
def delete_note(note_id: str) -> dict:
    """Delete a note by its ID.

    Returns:
        Dictionary with ``deleted`` telling whether a note was removed.
    """
    deleted = manager.delete_note(note_id)
    logger.info("Tool delete_note invoked — id=%s, deleted=%s", note_id, deleted)
    return {"deleted": deleted, "note_id": note_id}


@mcp.tool()
def filter_notes(tags: list[str]) -> dict:
    """Return notes that have every one of the given tags (exact match).

    An empty list returns all notes.
    """
    notes = manager.filter_notes_by_tags(tags)
    logger.info("Tool filter_notes invoked — tags=%s, found=%d", tags, len(notes))
    return _dump(notes)


@mcp.tool()
def list_tags() -> dict:
    """List every tag in use, sorted alphabetically."""
    tags = manager.get_all_tags()
    logger.info("Tool list_tags invoked — found=%d", len(tags))
    return {"count": len(tags), "tags": tags}


@mcp.tool()
def health_check() -> dict:
    """Check whether the Note Manager server is healthy.

    Returns:
        Dictionary with server status, note count, and timestamp.
    """
    logger.info("Tool health_check invoked")
    return {
        "status": "healthy",
        "server": "note-manager",
        "total_notes": len(manager.list_notes()),
        "timestamp": datetime.now(UTC).isoformat(),
    }


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    configure_logging("INFO")
    logger.info("Starting Note Manager MCP server on port %d ...", settings.mcp_port)
    mcp.run(transport="sse")
