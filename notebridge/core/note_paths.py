"""Note Paths — sanitizing, normalization and URL building for remote documents.

Invariants:
    - All functions are PURE: no IO, no clock reads (dates/timestamps are arguments)
    - A non-empty directory always ends with exactly one "/"
    - Note names never contain characters illegal in the remote filesystem;
      an empty result becomes "Untitled"
    - Names never end in "." or whitespace; Windows device names (CON, LPT1...)
      get a leading "_"
    - Vault and path are percent-encoded as single URI components
      ("/" inside the path becomes %2F)

Design Decisions:
    - quote(safe=...) tuned to encodeURIComponent's unreserved set so URLs are
      byte-identical to what the remote's other clients send
"""

import re
from datetime import date
from urllib.parse import quote

from notebridge.core.domain_types import RemoteDocumentRef

NOTE_EXTENSION = ".md"
MAX_NAME_LENGTH = 245
UNTITLED = "Untitled"

# Obsidian link syntax + characters no desktop filesystem accepts
_ILLEGAL_NAME_CHARS = re.compile(r'[#|^\[\]<>:"/\\?*\x00-\x1f]')
_LEADING_DOTS = re.compile(r"^\.+")
_TRAILING_DOTS_SPACES = re.compile(r"[\s.]+$")
# Windows device names, with or without an extension
_RESERVED_NAMES = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_URI_COMPONENT_SAFE = "!~*'()"


def sanitize_file_name(name: str) -> str:
    """Strip characters the vault filesystem or link syntax cannot hold."""
    cleaned = _ILLEGAL_NAME_CHARS.sub("", name or "")
    cleaned = _LEADING_DOTS.sub("", cleaned).strip()
    cleaned = _TRAILING_DOTS_SPACES.sub("", cleaned)
    if _RESERVED_NAMES.match(cleaned):
        cleaned = f"_{cleaned}"
    cleaned = _TRAILING_DOTS_SPACES.sub("", cleaned[:MAX_NAME_LENGTH])
    return cleaned or UNTITLED


def find_unencodable(**fields: str | None) -> str | None:
    """Name of the first field that is not valid UTF-8 text, or None.

    Python strings can carry lone surrogates (e.g. from a JSON "\\ud800"
    escape); those cannot go into a URL or a request body.
    """
    for name, value in fields.items():
        if not value:
            continue
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return name
    return None


def normalize_directory(directory: str | None) -> str:
    """'Logs' -> 'Logs/', 'Logs//' -> 'Logs/', '' -> ''."""
    if not directory:
        return ""
    trimmed = directory.rstrip("/")
    if not trimmed:
        return ""
    return f"{trimmed}/"


def note_path(directory: str, base_name: str, suffix: str = "") -> str:
    """Join an already-normalized directory and base name into a .md path."""
    return f"{directory}{base_name}{suffix}{NOTE_EXTENSION}"


def build_note_ref(vault: str | None, directory: str | None, note_name: str) -> RemoteDocumentRef:
    return RemoteDocumentRef(
        vault=vault or None,
        path=note_path(normalize_directory(directory), sanitize_file_name(note_name)),
    )


def daily_note_ref(vault: str | None, today: date) -> RemoteDocumentRef:
    """Daily notes live at the vault root as YYYY-MM-DD.md."""
    return RemoteDocumentRef(vault=vault or None, path=f"{today.isoformat()}{NOTE_EXTENSION}")


def collision_suffix(n: int) -> str:
    return f" {n}"


def encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def vault_resource_path(ref: RemoteDocumentRef) -> str:
    """'/vault/<vault>/<path>' with the vault segment omitted when unset."""
    if ref.vault:
        return f"/vault/{encode_component(ref.vault)}/{encode_component(ref.path)}"
    return f"/vault/{encode_component(ref.path)}"
