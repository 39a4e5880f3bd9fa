"""Pydantic schemas for household member records and classified edges.

These schemas describe the flat records supplied by the upstream household
service and relationship classifier. They are used for validation only; the
tree builders never mutate them.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Relationship codes produced by the upstream classifier. Codes outside this
# set are still accepted and treated as "other" relatives.
RELATIONSHIP_TYPES = (
    "head",
    "spouse",
    "son",
    "daughter",
    "brother",
    "sister",
    "niece",
    "nephew",
    "daughter-in-law",
    "son-in-law",
    "sister-in-law",
    "brother-in-law",
    "other",
)


def _as_text(value: Any) -> Any:
    """Coerce numeric identifiers (voter ids, house numbers) to strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return value


class InputMember(BaseModel):
    """A raw household member as listed on the electoral roll."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("id", "voter_id"),
        description="Stable member identifier (voter id)",
    )
    serial_no: str | None = Field(default=None, description="Serial number on the roll")
    name: str = Field(description="Display name as written on the roll")
    relative_name: str | None = Field(
        default=None, description="Free-text parent, guardian or spouse name"
    )
    gender: str = Field(default="", description="Gender as encoded by the source")
    age: int | None = Field(default=None, ge=0, description="Age in years, if known")
    house_no: str = Field(default="", description="House number within the ward")
    ward_no: str | None = Field(default=None, description="Ward number, if known")

    @field_validator("id", "serial_no", "house_no", "ward_no", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("age", mode="before")
    @classmethod
    def _blank_age_is_unknown(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def node_id(self, position: int) -> str:
        """Stable id for this member, falling back to serial number then position."""
        return self.id or self.serial_no or f"m-{position}"


class RelatedTo(BaseModel):
    """The member an edge points at."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        validation_alias=AliasChoices("id", "voter_id"),
        description="Identifier of the related member",
    )
    name: str = Field(default="", description="Name of the related member")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class RelationalEdge(BaseModel):
    """A member tagged with its relationship by the upstream classifier."""

    model_config = ConfigDict(populate_by_name=True)

    member_id: str = Field(
        validation_alias=AliasChoices("member_id", "voter_id", "id"),
        description="Identifier of the tagged member",
    )
    serial_no: str | None = Field(default=None, description="Serial number on the roll")
    name: str = Field(default="", description="Display name of the tagged member")
    age: int | None = Field(default=None, ge=0, description="Age in years, if known")
    gender: str = Field(default="", description="Gender as encoded by the source")
    relationship_type: str = Field(description="Relationship code, e.g. son or niece")
    relationship_to_head: str = Field(
        default="other", description="Either 'self' for the head or 'other'"
    )
    related_to: RelatedTo | None = Field(
        default=None, description="Member this relationship is anchored on"
    )
    confidence: float | None = Field(
        default=None, ge=0.0, le=1.0, description="Classifier confidence (0.0-1.0)"
    )

    @field_validator("member_id", "serial_no", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("relationship_type", "relationship_to_head", mode="before")
    @classmethod
    def _normalize_code(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def related_id(self) -> str | None:
        """Identifier this edge points at, if any."""
        return self.related_to.id if self.related_to else None

    def is_head(self) -> bool:
        """Check whether this edge tags the head of household."""
        return self.relationship_type == "head" or self.relationship_to_head == "self"


class HeadRecord(BaseModel):
    """The designated head of household."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        validation_alias=AliasChoices("id", "voter_id"),
        description="Identifier of the head",
    )
    name: str = Field(description="Display name of the head")
    age: int | None = Field(default=None, ge=0, description="Age in years, if known")
    gender: str = Field(default="", description="Gender as encoded by the source")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class HouseholdDescriptor(BaseModel):
    """A household with its classified relationship edges."""

    head: HeadRecord = Field(description="Head of household")
    relationships: list[RelationalEdge] = Field(
        default_factory=list, description="Classified edges for every member"
    )
    ward_no: str = Field(default="", description="Ward number")
    house_no: str = Field(default="", description="House number within the ward")
    member_count: int | None = Field(
        default=None, ge=0, description="Member count reported by the household service"
    )

    @field_validator("ward_no", "house_no", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)
