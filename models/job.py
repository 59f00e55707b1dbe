"""
Job data models — what the listing card promises, what the detail page says,
and the facts derived from the job description.
"""

from types import MappingProxyType
from typing import Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def join_location(locality: str = "", region: str = "", country: str = "") -> str:
    """
    Build a display location from address parts.

    Empty parts are dropped before joining with ", ", so
    ("Burlington", "", "US") gives "Burlington, US".
    """
    parts = [(part or "").strip() for part in (locality, region, country)]
    joined = ", ".join(part for part in parts if part)
    return joined.replace(", ,", ",")


class JobListingSummary(BaseModel):
    """Expected metadata read off the first search-result card."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Job title from the card")
    location: str = Field(default="", description="Job location from the card")
    identifier: str = Field(default="", description="Job ID from the card")


class JobDetailRecord(BaseModel):
    """Actual metadata read from the detail page's structured data."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Job title")
    identifier: str = Field(description="Job ID")
    location: str = Field(default="", description="Joined locality, region, country")
    description_markup: str = Field(default="", description="HTML-escaped job description")


class ParsedDescription(BaseModel):
    """Facts derived from a job description. Built once by the content extractor."""

    model_config = ConfigDict(frozen=True)

    third_paragraph_first_sentence: Optional[str] = None
    second_bullets_by_header: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("second_bullets_by_header")
    @classmethod
    def freeze_bullets(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        # Copy first so later changes to the input dict are not visible
        return MappingProxyType(dict(value))

    @field_serializer("second_bullets_by_header")
    def dump_bullets(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def second_bullet_for(self, header: str) -> Optional[str]:
        """Return the second bullet listed under a header, matched case-insensitively."""
        if header is None:
            return None
        return self.second_bullets_by_header.get(header.lower())


# ── Embedded structured data ────────────────────────────────────
# Shape of the JSON block on the detail page. Extra keys are ignored.

class StructuredIdentifier(BaseModel):
    value: str


class StructuredAddress(BaseModel):
    addressLocality: Optional[str] = None
    addressRegion: Optional[str] = None
    addressCountry: Optional[str] = None


class StructuredJobLocation(BaseModel):
    address: StructuredAddress


class StructuredJobPosting(BaseModel):
    title: str
    identifier: StructuredIdentifier
    jobLocation: StructuredJobLocation
    description: str

    def to_record(self) -> JobDetailRecord:
        address = self.jobLocation.address
        return JobDetailRecord(
            title=self.title,
            identifier=self.identifier.value,
            location=join_location(
                address.addressLocality,
                address.addressRegion,
                address.addressCountry,
            ),
            description_markup=self.description,
        )


class JobDetailView(BaseModel):
    """Everything captured while opening the first search result."""

    model_config = ConfigDict(frozen=True)

    summary: JobListingSummary
    detail: JobDetailRecord
    description: ParsedDescription
