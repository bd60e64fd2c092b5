"""Pydantic models for course information extraction."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_HOURS_PER_WEEK = 10


class CourseExtractionParams(BaseModel):
    """Parameters for one course extraction request."""

    course_url: str = Field(..., min_length=1, description="URL of the course page")
    hours_per_week: float = Field(
        default=DEFAULT_HOURS_PER_WEEK,
        gt=0,
        description="Study pace the learner plans to keep",
    )

    @field_validator("course_url")
    @classmethod
    def validate_course_url(cls, v: str) -> str:
        """Strip the URL and reject blank values."""
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("Course URL is required")
        return cleaned

    @property
    def pace(self) -> str:
        """Human readable pace, e.g. '10 hours per week'."""
        hours = self.hours_per_week
        hours_text = str(int(hours)) if float(hours).is_integer() else str(hours)
        return f"{hours_text} hours per week"

    model_config = ConfigDict(frozen=True)


class Milestone(BaseModel):
    """A named checkpoint in a course schedule."""

    name: str = Field(..., min_length=1, description="Milestone name")
    deadline: date = Field(..., description="Calendar date the milestone is due")


class CourseInfo(BaseModel):
    """Validated course information with a computed milestone schedule."""

    name: str = Field(..., description="Course name")
    provider: str = Field(..., description="Course provider")
    duration: str = Field(..., description="Free-text duration, e.g. '12 weeks'")
    pace: str = Field(..., description="Free-text study pace")
    objectives: list[str] = Field(default_factory=list)
    prerequisites: list[str] = Field(default_factory=list)
    main_skills: list[str] = Field(default_factory=list)
    milestones: list[Milestone] = Field(default_factory=list)

    @field_validator("milestones")
    @classmethod
    def validate_milestones(cls, v: list[Milestone]) -> list[Milestone]:
        """Ensure milestone deadlines strictly increase."""
        for previous, current in zip(v, v[1:]):
            if current.deadline <= previous.deadline:
                raise ValueError(
                    f"Milestone '{current.name}' is not due after '{previous.name}'"
                )
        return v

    @property
    def final_deadline(self) -> date | None:
        """Deadline of the last milestone, if any."""
        return self.milestones[-1].deadline if self.milestones else None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Machine Learning",
                "provider": "Coursera",
                "duration": "12 weeks",
                "pace": "10 hours per week",
                "objectives": ["Supervised learning", "Model evaluation", "Tuning"],
                "prerequisites": ["Linear algebra"],
                "mainSkills": ["Python", "scikit-learn", "Statistics"],
                "milestones": [
                    {"name": "Foundations", "deadline": "2025-01-29"},
                    {"name": "Final project", "deadline": "2025-03-26"},
                ],
            }
        },
    )
