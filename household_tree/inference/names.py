"""Name normalization used as a matching key between household members."""

import re

# Honorifics and common name suffixes that vary between a member's own entry
# and the way relatives refer to them. Longest first so "श्रीमती" is not
# reduced to "मती" by the shorter "श्री".
HONORIFIC_TOKENS = (
    "श्रीमती",
    "कुमारी",
    "प्रसाद",
    "कुमार",
    "सिंह",
    "बाबू",
    "श्री",
    "देवी",
    "सिह",
    "लाल",
)

_HONORIFIC_RE = re.compile("|".join(re.escape(token) for token in HONORIFIC_TOKENS))
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_name(name: str | None) -> str:
    """Reduce a display name to a key for relative-name matching.

    The key is never shown to users.

    Args:
        name: Display name, possibly None

    Returns:
        Case-folded name with honorifics and all whitespace removed, or an
        empty string for missing input
    """
    if not name:
        return ""
    key = name.strip().casefold()
    key = _HONORIFIC_RE.sub("", key)
    return _WHITESPACE_RE.sub("", key)
