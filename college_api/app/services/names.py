"""Clean-up of institution display names."""

import re

# ":<anything but '>' or ')'>)" e.g. the ":12)" tail of "ABC College (Id:12)".
_ANNOTATION_RE = re.compile(r":[^>)]*\)", re.IGNORECASE)
_ID_MARKER_RE = re.compile(r"\(Id", re.IGNORECASE)


def normalize_name(name: str) -> str:
    """Strip ``(Id:...)`` style suffixes from a college name.

    ``"ABC College (Id:12)"`` becomes ``"ABC College"``.  Names without
    an annotation are returned trimmed.  Removing a marker can splice
    a new one together (``"(I(Idd"``), so the substitutions repeat
    until the name stops changing.
    """
    previous = None
    while name != previous:
        previous = name
        name = _ID_MARKER_RE.sub("", _ANNOTATION_RE.sub("", name))
    return name.strip()
