from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime, timezone
from typing import Annotated, Dict


TraitScore = Annotated[int, Field(ge=0, le=100)]


class ProfileBase(BaseModel):
    """
    Base model for the scored profiles.

    Profiles are immutable once computed; a retake produces new instances.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def scores(self) -> Dict[str, int]:
        """Field name -> score, in declaration order."""
        return {name: getattr(self, name) for name in type(self).model_fields}


class PersonalityProfile(ProfileBase):
    """
    Big Five personality profile.
    """

    openness: TraitScore = Field(..., description="Creativity, imagination, new ideas")
    conscientiousness: TraitScore = Field(..., description="Organization, reliability")
    extraversion: TraitScore = Field(..., description="Social interaction, leadership")
    agreeableness: TraitScore = Field(..., description="Kindness, empathy, trust")
    neuroticism: TraitScore = Field(..., description="Anxiety, stress (inverted in the PIC Index)")


class InterestProfile(ProfileBase):
    """
    Holland Code (RIASEC) interest profile.
    """

    realistic: TraitScore
    investigative: TraitScore
    artistic: TraitScore
    social: TraitScore
    enterprising: TraitScore
    conventional: TraitScore


class CognitiveProfile(ProfileBase):
    """
    Cognitive ability profile (percentage of correct answers per ability).
    """

    logical_reasoning: TraitScore = Field(..., alias="logicalReasoning")
    verbal_ability: TraitScore = Field(..., alias="verbalAbility")
    problem_solving: TraitScore = Field(..., alias="problemSolving")
    numerical_aptitude: TraitScore = Field(..., alias="numericalAptitude")


class InsightXReport(BaseModel):
    """
    Snapshot produced once per completed assessment submission.

    Serialized with camelCase aliases for report consumers:
    personalityProfile, interestProfile, cognitiveProfile, picIndex, generatedAt.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    personality_profile: PersonalityProfile = Field(..., alias="personalityProfile")
    interest_profile: InterestProfile = Field(..., alias="interestProfile")
    cognitive_profile: CognitiveProfile = Field(..., alias="cognitiveProfile")
    pic_index: TraitScore = Field(
        ...,
        alias="picIndex",
        description="Composite Personality-Interest-Cognitive index",
    )
    generated_at: datetime = Field(
        ...,
        alias="generatedAt",
        description="Report creation timestamp (UTC)",
    )

    @field_validator("generated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken to be UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    def to_document(self) -> dict:
        """JSON-safe dict with camelCase keys, as handed to the document store."""
        return self.model_dump(mode="json", by_alias=True)
