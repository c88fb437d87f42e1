from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict


class AssessmentSubmission(BaseModel):
    """
    Raw answers for one completed assessment, one map per section.

    Only personality, interest and cognitive_abilities are scored.
    Self-reported skills and career values (CVQ) are stored alongside.
    """

    model_config = ConfigDict(populate_by_name=True)

    personality: Dict[str, Any] = Field(
        default_factory=dict,
        description="Likert answers keyed p1..p19",
    )

    interest: Dict[str, Any] = Field(
        default_factory=dict,
        description="Likert answers keyed i1..i20",
    )

    cognitive_abilities: Dict[str, Any] = Field(
        default_factory=dict,
        alias="cognitiveAbilities",
        description="Selected options keyed c1..c20",
    )

    self_reported_skills: Dict[str, Any] = Field(
        default_factory=dict,
        alias="selfReportedSkills",
    )

    cvq: Dict[str, Any] = Field(
        default_factory=dict,
        description="Career values questionnaire answers",
    )
