"""Hindi role labels for relationship codes.

Used by both tree builders so a node carries the same label whichever path
produced it.
"""

from household_tree.inference.gender import is_female_gender

HEAD_LABEL = "मुखिया"
WIFE_LABEL = "पत्नी"
HUSBAND_LABEL = "पति"
SON_LABEL = "पुत्र"
DAUGHTER_LABEL = "पुत्री"
BROTHER_LABEL = "भाई"
SISTER_LABEL = "बहन"
NEPHEW_LABEL = "भतीजा"
NIECE_LABEL = "भतीजी"
RELATIVE_LABEL = "रिश्तेदार"

RELATIONSHIP_LABELS: dict[str, str] = {
    "head": HEAD_LABEL,
    "self": HEAD_LABEL,
    "wife": WIFE_LABEL,
    "husband": HUSBAND_LABEL,
    "son": SON_LABEL,
    "daughter": DAUGHTER_LABEL,
    "brother": BROTHER_LABEL,
    "sister": SISTER_LABEL,
    "daughter-in-law": "बहू",
    "son-in-law": "दामाद",
    "sister-in-law": "भाभी",
    "brother-in-law": "जीजा",
    "niece": NIECE_LABEL,
    "nephew": NEPHEW_LABEL,
    "father": "पिता",
    "mother": "माता",
    "grandfather": "दादा",
    "grandmother": "दादी",
    "grandson": "पोता",
    "granddaughter": "पोती",
    "relative": RELATIVE_LABEL,
    "other": "अन्य",
}


def get_relationship_label(code: str, gender: str | None = None) -> str:
    """Get the Hindi label for a relationship code.

    Args:
        code: Relationship code, e.g. "son" or "daughter-in-law"
        gender: Gender of the member, only consulted for "spouse"

    Returns:
        The label, or the code itself when it is not recognized
    """
    if code == "spouse":
        return WIFE_LABEL if is_female_gender(gender) else HUSBAND_LABEL
    return RELATIONSHIP_LABELS.get(code, code)


def child_label(gender: str | None) -> str:
    """Son or daughter label by gender."""
    return DAUGHTER_LABEL if is_female_gender(gender) else SON_LABEL


def sibling_label(gender: str | None) -> str:
    """Brother or sister label by gender."""
    return SISTER_LABEL if is_female_gender(gender) else BROTHER_LABEL


def sibling_child_label(gender: str | None) -> str:
    """Nephew or niece label by gender."""
    return NIECE_LABEL if is_female_gender(gender) else NEPHEW_LABEL
