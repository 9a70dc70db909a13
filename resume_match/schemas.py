"""Validated records produced by the extraction and analysis stages."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONTACT_NOT_PROVIDED = "Not provided"


class StructuredResume(BaseModel):
    """Resume fields extracted from raw document text.

    Missing (or null) fields fall back to empty lists and the
    ``"Not provided"`` contact sentinel. Present fields of the wrong
    type fail validation.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    skills: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    education: List[str] = Field(default_factory=list)
    contact: str = CONTACT_NOT_PROVIDED

    @field_validator("skills", "experience", "education", mode="before")
    @classmethod
    def _null_list_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("contact", mode="before")
    @classmethod
    def _blank_contact_to_sentinel(cls, value: Any) -> Any:
        if value is None:
            return CONTACT_NOT_PROVIDED
        if isinstance(value, str) and not value.strip():
            return CONTACT_NOT_PROVIDED
        return value

    def is_empty(self) -> bool:
        return not (self.skills or self.experience or self.education)


class MatchAnalysis(BaseModel):
    """Comparison of a resume against a job description.

    Serialized with the camelCase names the models are prompted to emit.
    """

    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)

    match_percentage: float = Field(alias="matchPercentage", ge=0, le=100, allow_inf_nan=False)
    matched_skills: List[str] = Field(alias="matchedSkills")
    missing_skills: List[str] = Field(alias="missingSkills")
    suggestions: List[str]

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
