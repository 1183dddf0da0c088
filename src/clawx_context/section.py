"""Marker-delimited section handling for gateway bootstrap documents.

Pure text transforms, no I/O. A document holds at most one managed section:
the first end marker that follows a begin marker closes it, and the nearest
begin marker before that end opens it.
"""

from __future__ import annotations

from clawx_context import CLAWX_BEGIN, CLAWX_END

ABSENT = "absent"
PRESENT = "present"
MALFORMED = "malformed"


def wrap_section(body: str) -> str:
    """Wrap a section body in the begin/end markers."""
    return f"{CLAWX_BEGIN}\n{body.strip()}\n{CLAWX_END}"


def locate_section(content: str) -> tuple[int, int] | None:
    """Return the (start, stop) span of the managed section, markers included."""
    begin = content.find(CLAWX_BEGIN)
    if begin == -1:
        return None
    end = content.find(CLAWX_END, begin + len(CLAWX_BEGIN))
    if end == -1:
        return None
    # A stray begin marker before the real pair is foreign text
    begin = content.rfind(CLAWX_BEGIN, 0, end)
    return begin, end + len(CLAWX_END)


def section_state(content: str) -> str:
    """Classify a document as absent, present or malformed.

    Malformed means both markers occur but no end marker follows the first
    begin marker, e.g. a hand edit that swapped them.
    """
    if CLAWX_BEGIN not in content or CLAWX_END not in content:
        return ABSENT
    if locate_section(content) is None:
        return MALFORMED
    return PRESENT


def merge_section(existing: str, section: str) -> str:
    """Insert or replace the managed section in a document.

    If the markers are present, the span between them (inclusive) is
    replaced and everything around it is kept byte-for-byte. If either
    marker is missing, the section is appended after the trimmed content.
    A malformed document is returned unchanged.
    """
    state = section_state(existing)
    if state == MALFORMED:
        return existing

    wrapped = wrap_section(section)
    if state == PRESENT:
        start, stop = locate_section(existing)
        return existing[:start] + wrapped + existing[stop:]
    return existing.rstrip() + "\n\n" + wrapped + "\n"


def is_hollow_bootstrap(content: str) -> bool:
    """True when the document is nothing but the managed section.

    Such a file was created by an earlier merge before the gateway seeded
    it. Deleting it lets the gateway write its full template next start.
    """
    span = locate_section(content)
    if span is None:
        return False
    start, stop = span
    return not content[:start].strip() and not content[stop:].strip()
