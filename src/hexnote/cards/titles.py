"""Deriving a note title from its body and turning it into a filename."""

import re

DEFAULT_TITLE = "Untitled"
MAX_FILENAME_LENGTH = 100

# Most filesystems cap a filename at 255 bytes; leave room for " (999).md".
MAX_STEM_BYTES = 255 - len(" (999).md")

# Characters that are illegal or troublesome in filenames on at least one
# supported platform, mapped to a look-alike (or removed).
_SUBSTITUTIONS = str.maketrans(
    {
        "\\": "-",
        "/": "-",
        ":": "-",
        "*": "-",
        "|": "-",
        "?": None,
        '"': "'",
        "<": "(",
        ">": ")",
    }
)
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def derive_title(body: str) -> str:
    """
    Pick a human title for a note body.

    The first Markdown heading wins, then the first non-empty line.

    Args:
        body: Note content (without front matter)

    Returns:
        Title text, or "Untitled" for a blank body
    """
    # Only \n separates lines, as in the desktop app.
    lines = body.split("\n")

    for line in lines:
        stripped = line.strip()
        if stripped.startswith("#"):
            title = stripped.lstrip("#").strip()
            if title:
                return title

    for line in lines:
        if line.strip():
            return line.strip()

    return DEFAULT_TITLE


def sanitize_filename(title: str) -> str:
    """
    Make a title safe to use as a filename stem on Windows, macOS and Linux.

    Args:
        title: Raw title text

    Returns:
        Sanitized stem of at most 100 characters and 246 UTF-8 bytes, never
        empty
    """
    name = _CONTROL_CHARS.sub("", title.translate(_SUBSTITUTIONS))
    name = name.strip().rstrip(" .")

    if len(name) > MAX_FILENAME_LENGTH:
        name = name[:MAX_FILENAME_LENGTH].rstrip(" .")

    encoded = name.encode("utf-8")
    if len(encoded) > MAX_STEM_BYTES:
        name = encoded[:MAX_STEM_BYTES].decode("utf-8", errors="ignore").rstrip(" .")

    return name or DEFAULT_TITLE


def filename_stem(body: str) -> str:
    """Sanitized filename stem for a note body."""
    return sanitize_filename(derive_title(body))
