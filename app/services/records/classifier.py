"""Personal-record detection across upstream conventions."""

from typing import Any

PR_FLAG_FIELDS = ("isPersonalRecord", "personal_record")
PR_TAG_FIELD = "record_tag"
PR_TAGS_FIELD = "tags"
PR_MARKER = "PR"


def is_personal_record(raw: Any) -> bool:
    """True if any known PR signal is set.

    Signals (any one suffices):
    - boolean flag under one of PR_FLAG_FIELDS
    - PR_TAG_FIELD string containing "PR" (case-insensitive substring, so
      "SPRING" also matches)
    - PR_TAGS_FIELD collection with an element equal to "PR" (case-insensitive)
    """
    if not isinstance(raw, dict):
        return False

    if any(raw.get(field) is True for field in PR_FLAG_FIELDS):
        return True

    tag = raw.get(PR_TAG_FIELD)
    if isinstance(tag, str) and PR_MARKER in tag.upper():
        return True

    tags = raw.get(PR_TAGS_FIELD)
    if isinstance(tags, (list, tuple, set)):
        return any(isinstance(t, str) and t.upper() == PR_MARKER for t in tags)

    return False
