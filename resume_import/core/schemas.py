from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional


ParseQuality = Literal["high", "medium", "low"]


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfoGuess(CamelModel):
    name: Optional[str] = None
    role: Optional[str] = None  # Professional title / headline
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None  # City, State/Country
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None

    def is_empty(self) -> bool:
        return not any(self.model_dump().values())


class SummaryGuess(CamelModel):
    content: Optional[str] = Field(default=None, max_length=500)


class ExperienceEntry(CamelModel):
    id: int
    company: str = ""
    role: str = ""
    location: str = ""
    start_date: str = Field(default="", description="YYYY-MM or empty")
    end_date: Optional[str] = Field(default=None, description="YYYY-MM, or None when current/unknown")
    is_current: bool = False
    description: str = ""
    order: int = 0


class EducationEntry(CamelModel):
    id: int
    institution: str = ""  # University, College, Institute name
    degree: str = ""  # Bachelor of Science, M.S., etc.
    field: str = ""  # Computer Science, Engineering, etc.
    graduation_date: str = Field(default="", description="YYYY-05 or empty")
    location: str = ""
    description: str = ""
    order: int = 0


class SkillEntry(CamelModel):
    id: int
    name: str
    category: str = "General"
    order: int = 0


class ExtractionResult(CamelModel):
    personal_info: Optional[PersonalInfoGuess] = None
    summary: Optional[SummaryGuess] = None
    experiences: Optional[List[ExperienceEntry]] = None
    education: Optional[List[EducationEntry]] = None
    skills: Optional[List[SkillEntry]] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0, description="0.0 (nothing recovered) to 1.0 (complete)")


class ParseResponse(ExtractionResult):
    file_name: Optional[str] = None
    file_size: int = 0
    parse_quality: ParseQuality = "low"
    warnings: List[str] = Field(default_factory=list)
