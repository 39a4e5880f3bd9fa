"""Gender encoding classification."""

# Encodings seen in roll extracts that mean "female". Anything else, including
# unknown encodings, is treated as not female.
FEMALE_ENCODINGS = frozenset({"female", "f", "म", "महिला", "स्त्री"})


def is_female_gender(gender: str | None) -> bool:
    """Check if a gender string represents female."""
    if not gender:
        return False
    return gender.strip().casefold() in FEMALE_ENCODINGS
