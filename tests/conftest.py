from __future__ import annotations

from typing import Any

import pytest

from household_tree.schemas.members import HouseholdDescriptor


@pytest.fixture()
def three_generations() -> list[dict[str, Any]]:
    # Shyam -> son Ram, Ram married to Sita.
    return [
        {"id": "1", "name": "Shyam", "gender": "Male", "age": 60, "house_no": "12"},
        {"id": "2", "name": "Ram", "relative_name": "Shyam", "gender": "Male", "age": 30, "house_no": "12"},
        {"id": "3", "name": "Sita", "relative_name": "Ram", "gender": "Female", "age": 28, "house_no": "12"},
    ]


@pytest.fixture()
def absent_father() -> list[dict[str, Any]]:
    # Two siblings naming a father who is not on the roll.
    return [
        {"id": "a", "name": "Suresh", "relative_name": "Mohan", "gender": "Male", "age": 30, "house_no": "7"},
        {"id": "b", "name": "Kavita", "relative_name": "Mohan", "gender": "F", "age": 25, "house_no": "7"},
    ]


@pytest.fixture()
def classified_household() -> HouseholdDescriptor:
    return HouseholdDescriptor.model_validate(
        {
            "head": {"voter_id": 100, "name": "Hari", "age": 58, "gender": "Male"},
            "relationships": [
                {"voter_id": 100, "name": "Hari", "age": 58, "gender": "Male",
                 "relationship_type": "head", "relationship_to_head": "self"},
                {"voter_id": 101, "name": "Gita", "age": 54, "gender": "Female",
                 "relationship_type": "spouse", "related_to": {"voter_id": 100, "name": "Hari"}},
                {"voter_id": 102, "name": "Amit", "age": 30, "gender": "Male",
                 "relationship_type": "son", "related_to": {"voter_id": 100, "name": "Hari"}},
                {"voter_id": 103, "name": "Neha", "age": 27, "gender": "Female",
                 "relationship_type": "daughter", "related_to": {"voter_id": 100, "name": "Hari"}},
                {"voter_id": 104, "name": "Mohan", "age": 52, "gender": "Male",
                 "relationship_type": "brother", "related_to": {"voter_id": 100, "name": "Hari"}},
                {"voter_id": 105, "name": "Radha", "age": 49, "gender": "Female",
                 "relationship_type": "sister-in-law", "related_to": {"voter_id": 104, "name": "Mohan"}},
                {"voter_id": 106, "name": "Pinky", "age": 20, "gender": "Female",
                 "relationship_type": "niece", "related_to": {"voter_id": 104, "name": "Mohan"}},
            ],
            "ward_no": "5",
            "house_no": "12",
            "member_count": 7,
        }
    )
