"""
Input and output records for the compatibility engine.

Defines the data structures the engine consumes (freelancer profiles and
projects) and produces (candidate scores and team suggestions). Records are
plain dataclasses; the caller builds them from whatever storage it owns.

Quiz Composition (3 sections):
- Personality (9 Likert items, 1-5): leadership, traditionalism, peacekeeper,
  brainstormer, calmUnderPressure, listener, adaptable, controlNeed, challenger
- Work style (5 categorical choices)
- Scheduling (response time, meeting format, commitments, 7x3 availability
  grid, flexibility)

A profile's personality is one of two variants:
- LegacyPersonality: flat Likert vector predating the quiz
- QuizResult: the structured quiz, authoritative when present
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List, Union, ClassVar

import numpy as np

LIKERT_MIN = 1
LIKERT_MAX = 5
LIKERT_MIDPOINT = 3

DAYS_OF_WEEK = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
TIME_BLOCKS = ["morning", "afternoon", "evening"]

# Hours credited per available grid cell when no explicit hours are given
HOURS_PER_GRID_CELL = 3


def _normalize_label(value: str) -> str:
    """Lowercase and strip everything except letters, digits and '+'."""
    return re.sub(r"[^a-z0-9+]", "", str(value).lower())


# Labels submitted by the older quiz page, keyed by enum class name
_CHOICE_ALIASES: Dict[str, Dict[str, str]] = {
    "GradeExpectation": {"pass": "passing", "aa+": "A", "b+a": "B+"},
    "DeadlineStyle": {"late": "lastminute", "underpressure": "pressure"},
    "MissingWorkResponse": {"immediate": "doIt", "friendly": "checkIn"},
    "ResponseTime": {"12hrs": "1-2hours", "24hrs": "24hours"},
    "MeetingFormat": {"videoonly": "video"},
}


class QuizChoice(Enum):
    """Base for categorical quiz answers; accepts case and label variants."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        key = _normalize_label(value)
        alias = _CHOICE_ALIASES.get(cls.__name__, {}).get(key)
        if alias is not None:
            return cls(alias)
        for member in cls:
            if _normalize_label(member.value) == key:
                return member
        return None

    @property
    def ordinal(self) -> int:
        """Position of this choice in declaration order."""
        return list(type(self)).index(self)


class GradeExpectation(QuizChoice):
    """Quality bar the freelancer holds themselves to (most to least ambitious)."""
    A = "A"
    B_PLUS = "B+"
    B = "B"
    PASSING = "passing"


class DeadlineStyle(QuizChoice):
    """How the freelancer paces work against deadlines (earliest first)."""
    EARLY = "early"
    ONTIME = "ontime"
    LAST_MINUTE = "lastminute"
    PRESSURE = "pressure"


class VagueTaskResponse(QuizChoice):
    """Reaction to an under-specified task."""
    INITIATIVE = "initiative"
    PROPOSE = "propose"
    WAIT = "wait"
    ASK_INSTRUCTOR = "askInstructor"


class MissingWorkResponse(QuizChoice):
    """Reaction to a teammate's missing contribution."""
    DO_IT = "doIt"
    CHECK_IN = "checkIn"
    WAIT = "wait"
    ALERT = "alert"


class TeamRole(QuizChoice):
    """Role the freelancer usually takes in a team."""
    LEADER = "leader"
    WORKHORSE = "workhorse"
    DIPLOMAT = "diplomat"
    SPECIALIST = "specialist"


class ResponseTime(QuizChoice):
    """Typical message response latency (fastest first)."""
    WITHIN_HOURS = "1-2hours"
    SAME_DAY = "sameDay"
    WITHIN_DAY = "24hours"
    FEW_DAYS = "fewDays"


class MeetingFormat(QuizChoice):
    """Preferred meeting format (most to least synchronous)."""
    IN_PERSON = "inPerson"
    HYBRID = "hybrid"
    VIDEO = "video"
    ASYNC = "async"


class ScheduleFlexibility(QuizChoice):
    """How easily the freelancer can move commitments (most flexible first)."""
    VERY = "very"
    SOMEWHAT = "somewhat"
    NOT_AT_ALL = "notAtAll"


class ExperienceLevel(QuizChoice):
    """Experience level a project asks for."""
    ENTRY = "entry"
    INTERMEDIATE = "intermediate"
    SENIOR = "senior"
    EXPERT = "expert"


def _coerce_likert(value: Any) -> int:
    """Missing answers become the midpoint; out-of-range answers are clamped."""
    if value is None:
        return LIKERT_MIDPOINT
    return int(np.clip(round(float(value)), LIKERT_MIN, LIKERT_MAX))


def _first_present(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in data (camelCase or snake_case)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass
class PersonalityAssessment:
    """
    Personality quiz answers (Section 1).

    All answers are on a 1-5 Likert scale:
    1 = Strongly Disagree ... 5 = Strongly Agree

    Missing answers (None) default to the midpoint 3 and out-of-range
    answers are clamped, so construction never fails.

    Attributes:
        leadership: "I usually take the lead in group discussions"
        traditionalism: "I prefer proven methods and clear rubrics"
        peacekeeper: "I prioritize compromise over winning the debate"
        brainstormer: "I get energized by brainstorming sessions"
        calm_under_pressure: "I stay calm under tight deadlines"
        listener: "I wait for others to speak first"
        adaptable: "I am comfortable changing direction mid-way"
        control_need: "I feel anxious if I don't know what everyone is doing"
        challenger: "I am willing to challenge a teammate's logic"
    """
    leadership: int = LIKERT_MIDPOINT
    traditionalism: int = LIKERT_MIDPOINT
    peacekeeper: int = LIKERT_MIDPOINT
    brainstormer: int = LIKERT_MIDPOINT
    calm_under_pressure: int = LIKERT_MIDPOINT
    listener: int = LIKERT_MIDPOINT
    adaptable: int = LIKERT_MIDPOINT
    control_need: int = LIKERT_MIDPOINT
    challenger: int = LIKERT_MIDPOINT

    ITEMS: ClassVar[List[str]] = [
        "leadership", "traditionalism", "peacekeeper", "brainstormer",
        "calm_under_pressure", "listener", "adaptable", "control_need", "challenger",
    ]

    def __post_init__(self):
        for item in self.ITEMS:
            setattr(self, item, _coerce_likert(getattr(self, item)))

    def to_vector(self) -> List[int]:
        """Answers in quiz order."""
        return [getattr(self, item) for item in self.ITEMS]

    def to_dict(self) -> Dict[str, int]:
        return {item: getattr(self, item) for item in self.ITEMS}

    @classmethod
    def from_vector(cls, answers: List[Optional[int]]) -> "PersonalityAssessment":
        """Build from answers in quiz order; a short list leaves the rest at the midpoint."""
        values = {item: answers[i] for i, item in enumerate(cls.ITEMS) if i < len(answers)}
        # The quiz page sent 0 for unanswered items
        values = {k: (None if v == 0 else v) for k, v in values.items()}
        return cls(**values)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonalityAssessment":
        return cls(
            leadership=data.get("leadership"),
            traditionalism=data.get("traditionalism"),
            peacekeeper=data.get("peacekeeper"),
            brainstormer=data.get("brainstormer"),
            calm_under_pressure=_first_present(data, "calm_under_pressure", "calmUnderPressure"),
            listener=data.get("listener"),
            adaptable=data.get("adaptable"),
            control_need=_first_present(data, "control_need", "controlNeed"),
            challenger=data.get("challenger"),
        )


@dataclass
class BigFiveScores:
    """
    Big Five trait scores, each clamped to [0, 100].

    Neuroticism has inverted semantics: lower means more stable.
    """
    extraversion: float = 50.0
    openness: float = 50.0
    agreeableness: float = 50.0
    conscientiousness: float = 50.0
    neuroticism: float = 50.0

    TRAITS: ClassVar[List[str]] = [
        "extraversion", "openness", "agreeableness", "conscientiousness", "neuroticism",
    ]

    def __post_init__(self):
        for trait in self.TRAITS:
            value = getattr(self, trait)
            value = 50.0 if value is None else float(value)
            setattr(self, trait, float(np.clip(value, 0.0, 100.0)))

    def to_dict(self) -> Dict[str, float]:
        return {trait: getattr(self, trait) for trait in self.TRAITS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BigFiveScores":
        return cls(**{trait: data.get(trait) for trait in cls.TRAITS})


@dataclass
class WorkStyleAssessment:
    """Work style choices (Section 2)."""
    grade_expectation: GradeExpectation = GradeExpectation.B_PLUS
    deadline_style: DeadlineStyle = DeadlineStyle.ONTIME
    vague_task_response: VagueTaskResponse = VagueTaskResponse.PROPOSE
    missing_work_response: MissingWorkResponse = MissingWorkResponse.CHECK_IN
    team_role: TeamRole = TeamRole.SPECIALIST

    def __post_init__(self):
        """Convert string inputs to enums if needed."""
        self.grade_expectation = GradeExpectation(self.grade_expectation)
        self.deadline_style = DeadlineStyle(self.deadline_style)
        self.vague_task_response = VagueTaskResponse(self.vague_task_response)
        self.missing_work_response = MissingWorkResponse(self.missing_work_response)
        self.team_role = TeamRole(self.team_role)

    def to_dict(self) -> Dict[str, str]:
        return {
            "grade_expectation": self.grade_expectation.value,
            "deadline_style": self.deadline_style.value,
            "vague_task_response": self.vague_task_response.value,
            "missing_work_response": self.missing_work_response.value,
            "team_role": self.team_role.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkStyleAssessment":
        defaults = cls()
        return cls(
            grade_expectation=_first_present(
                data, "grade_expectation", "gradeExpectation", default=defaults.grade_expectation),
            deadline_style=_first_present(
                data, "deadline_style", "deadlineStyle", "internalDeadline",
                default=defaults.deadline_style),
            vague_task_response=_first_present(
                data, "vague_task_response", "vagueTaskResponse", "ambiguityApproach",
                default=defaults.vague_task_response),
            missing_work_response=_first_present(
                data, "missing_work_response", "missingWorkResponse", "teamResponsiveness",
                default=defaults.missing_work_response),
            team_role=_first_present(
                data, "team_role", "teamRole", "contributionStyle", default=defaults.team_role),
        )


@dataclass
class ScheduleCommitments:
    """Outside commitments competing for the freelancer's time."""
    works_20_plus_hours: bool = False
    family_caregiver: bool = False
    intensive_sports_clubs: bool = False
    long_commute: bool = False
    schedule_clear: bool = False

    @property
    def busy_count(self) -> int:
        """Number of commitments that take time away (schedule_clear is not one)."""
        return sum([
            bool(self.works_20_plus_hours),
            bool(self.family_caregiver),
            bool(self.intensive_sports_clubs),
            bool(self.long_commute),
        ])

    def to_dict(self) -> Dict[str, bool]:
        return {
            "works_20_plus_hours": self.works_20_plus_hours,
            "family_caregiver": self.family_caregiver,
            "intensive_sports_clubs": self.intensive_sports_clubs,
            "long_commute": self.long_commute,
            "schedule_clear": self.schedule_clear,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleCommitments":
        return cls(
            works_20_plus_hours=bool(_first_present(data, "works_20_plus_hours", "works20PlusHours", default=False)),
            family_caregiver=bool(_first_present(data, "family_caregiver", "familyCaregiver", default=False)),
            intensive_sports_clubs=bool(
                _first_present(data, "intensive_sports_clubs", "intensiveSportsClubs", default=False)),
            long_commute=bool(_first_present(data, "long_commute", "longCommute", default=False)),
            schedule_clear=bool(_first_present(data, "schedule_clear", "scheduleClear", default=False)),
        )


@dataclass
class AvailabilityGrid:
    """
    Weekly availability as a 7 x 3 boolean matrix.

    Rows follow DAYS_OF_WEEK, columns follow TIME_BLOCKS.
    """
    cells: np.ndarray = field(default_factory=lambda: np.zeros((7, 3), dtype=bool))

    def __post_init__(self):
        cells = np.asarray(self.cells, dtype=bool)
        if cells.shape != (len(DAYS_OF_WEEK), len(TIME_BLOCKS)):
            raise ValueError(f"Availability grid must be 7x3, got {cells.shape}")
        self.cells = cells

    @property
    def available_count(self) -> int:
        return int(self.cells.sum())

    def estimated_hours_per_week(self) -> float:
        return float(self.available_count * HOURS_PER_GRID_CELL)

    def to_dict(self) -> Dict[str, Dict[str, bool]]:
        return {
            day: {block: bool(self.cells[i, j]) for j, block in enumerate(TIME_BLOCKS)}
            for i, day in enumerate(DAYS_OF_WEEK)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AvailabilityGrid":
        """Build from {day: {block: bool}}; day keys are case-insensitive, missing days are unavailable."""
        by_day = {str(k).lower(): v for k, v in (data or {}).items()}
        cells = np.zeros((len(DAYS_OF_WEEK), len(TIME_BLOCKS)), dtype=bool)
        for i, day in enumerate(DAYS_OF_WEEK):
            slots = by_day.get(day) or {}
            for j, block in enumerate(TIME_BLOCKS):
                cells[i, j] = bool(slots.get(block, False))
        return cls(cells=cells)


@dataclass
class SchedulingAssessment:
    """Scheduling and communication answers (Section 3)."""
    response_time: ResponseTime = ResponseTime.SAME_DAY
    meeting_format: MeetingFormat = MeetingFormat.VIDEO
    commitments: ScheduleCommitments = field(default_factory=ScheduleCommitments)
    availability_grid: AvailabilityGrid = field(default_factory=AvailabilityGrid)
    flexibility: ScheduleFlexibility = ScheduleFlexibility.SOMEWHAT

    def __post_init__(self):
        self.response_time = ResponseTime(self.response_time)
        self.meeting_format = MeetingFormat(self.meeting_format)
        self.flexibility = ScheduleFlexibility(self.flexibility)
        if isinstance(self.commitments, dict):
            self.commitments = ScheduleCommitments.from_dict(self.commitments)
        if isinstance(self.availability_grid, dict):
            self.availability_grid = AvailabilityGrid.from_dict(self.availability_grid)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "response_time": self.response_time.value,
            "meeting_format": self.meeting_format.value,
            "commitments": self.commitments.to_dict(),
            "availability_grid": self.availability_grid.to_dict(),
            "flexibility": self.flexibility.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchedulingAssessment":
        defaults = cls()
        commitments = _first_present(data, "commitments", default={})
        if isinstance(commitments, list):
            # The quiz page sent the checked commitment labels as a list
            labels = {_normalize_label(c) for c in commitments}
            commitments = {
                "works_20_plus_hours": any(l.startswith("works20") for l in labels),
                "family_caregiver": any("caregiver" in l for l in labels),
                "intensive_sports_clubs": any("sports" in l for l in labels),
                "long_commute": any("commute" in l for l in labels),
                "schedule_clear": any("clear" in l for l in labels),
            }
        return cls(
            response_time=_first_present(data, "response_time", "responseTime", default=defaults.response_time),
            meeting_format=_first_present(data, "meeting_format", "meetingFormat", default=defaults.meeting_format),
            commitments=ScheduleCommitments.from_dict(commitments),
            availability_grid=AvailabilityGrid.from_dict(
                _first_present(data, "availability_grid", "availabilityGrid", default={})),
            flexibility=_first_present(
                data, "flexibility", "scheduleFlexibility", default=defaults.flexibility),
        )


@dataclass
class LegacyPersonality:
    """Flat Likert vector (1-5 per item) from the pre-quiz onboarding."""
    answers: List[int] = field(default_factory=list)

    kind: ClassVar[str] = "legacy"

    def legacy_vector(self) -> List[int]:
        return list(self.answers)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "answers": list(self.answers)}


@dataclass
class QuizResult:
    """
    Structured compatibility quiz result.

    Big Five scores are derived from the personality answers when not
    supplied, and clamped to [0, 100] either way.
    """
    personality: PersonalityAssessment = field(default_factory=PersonalityAssessment)
    work_style: WorkStyleAssessment = field(default_factory=WorkStyleAssessment)
    scheduling: SchedulingAssessment = field(default_factory=SchedulingAssessment)
    big_five: Optional[BigFiveScores] = None

    kind: ClassVar[str] = "quiz"

    def __post_init__(self):
        if isinstance(self.personality, dict):
            self.personality = PersonalityAssessment.from_dict(self.personality)
        if isinstance(self.work_style, dict):
            self.work_style = WorkStyleAssessment.from_dict(self.work_style)
        if isinstance(self.scheduling, dict):
            self.scheduling = SchedulingAssessment.from_dict(self.scheduling)
        if isinstance(self.big_five, dict):
            self.big_five = BigFiveScores.from_dict(self.big_five)
        if self.big_five is None:
            # Imported here to avoid circular imports
            from ..preprocessing.trait_normalizer import normalize_big_five
            self.big_five = normalize_big_five(self.personality)

    def legacy_vector(self) -> List[int]:
        """The 9 quiz answers, used when the other side of a pair has no quiz."""
        return self.personality.to_vector()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "personality": self.personality.to_dict(),
            "work_style": self.work_style.to_dict(),
            "scheduling": self.scheduling.to_dict(),
            "big_five": self.big_five.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuizResult":
        personality = data.get("personality", {})
        if isinstance(personality, list):
            personality = PersonalityAssessment.from_vector(personality)
        else:
            personality = PersonalityAssessment.from_dict(personality)
        big_five = _first_present(data, "big_five", "bigFiveScores", "personalityProfile")
        return cls(
            personality=personality,
            work_style=WorkStyleAssessment.from_dict(_first_present(data, "work_style", "workStyle", default={})),
            scheduling=SchedulingAssessment.from_dict(_first_present(data, "scheduling", default={})),
            big_five=BigFiveScores.from_dict(big_five) if big_five else None,
        )


PersonalityProfile = Union[LegacyPersonality, QuizResult]


@dataclass
class SkillEntry:
    """A named skill with proficiency clamped to 1-5."""
    skill: str
    proficiency: int = 3

    def __post_init__(self):
        self.skill = str(self.skill).strip()
        self.proficiency = _coerce_likert(self.proficiency)

    @property
    def key(self) -> str:
        return self.skill.lower()

    def to_dict(self) -> Dict[str, Any]:
        return {"skill": self.skill, "proficiency": self.proficiency}


@dataclass
class Availability:
    """Weekly hours (never negative) and an opaque timezone label."""
    hours_per_week: float = 0.0
    timezone: str = "UTC+0"

    def __post_init__(self):
        self.hours_per_week = max(0.0, float(self.hours_per_week or 0.0))

    def to_dict(self) -> Dict[str, Any]:
        return {"hours_per_week": self.hours_per_week, "timezone": self.timezone}


@dataclass
class FreelancerProfile:
    """
    A freelancer's matching-relevant state.

    The engine only reads profiles; it never mutates them.

    Attributes:
        user_id: Freelancer identifier
        skills: Skills, unique by case-insensitive name
        availability: Weekly hours and timezone
        personality: LegacyPersonality or QuizResult
        onboarding_complete: Display flag, not scored
    """
    user_id: str
    skills: List[SkillEntry] = field(default_factory=list)
    availability: Availability = field(default_factory=Availability)
    personality: PersonalityProfile = field(default_factory=LegacyPersonality)
    onboarding_complete: bool = False

    def __post_init__(self):
        skills = [SkillEntry(**s) if isinstance(s, dict) else s for s in self.skills]
        # Keep one entry per skill name, the highest proficiency wins
        unique: Dict[str, SkillEntry] = {}
        for entry in skills:
            current = unique.get(entry.key)
            if current is None or entry.proficiency > current.proficiency:
                unique[entry.key] = entry
        self.skills = list(unique.values())
        if isinstance(self.availability, dict):
            self.availability = Availability(**self.availability)

    @property
    def quiz(self) -> Optional[QuizResult]:
        return self.personality if isinstance(self.personality, QuizResult) else None

    def skill_map(self) -> Dict[str, int]:
        """Lowercased skill name -> proficiency."""
        return {entry.key: entry.proficiency for entry in self.skills}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "skills": [s.to_dict() for s in self.skills],
            "availability": self.availability.to_dict(),
            "personality": self.personality.to_dict(),
            "onboarding_complete": self.onboarding_complete,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], user_id: Optional[str] = None) -> "FreelancerProfile":
        """
        Create from a record dict.

        Accepts the web application's camelCase keys. A present quiz result
        wins over the legacy personality vector.
        """
        quiz_data = _first_present(data, "quiz_result", "quizResult")
        if quiz_data:
            personality: PersonalityProfile = QuizResult.from_dict(quiz_data)
        else:
            personality = LegacyPersonality(answers=list(data.get("personality") or []))

        availability_data = data.get("availability") or {}
        hours = _first_present(availability_data, "hours_per_week", "hoursPerWeek")
        if hours is None:
            hours = _first_present(data, "hours_per_week", "hoursPerWeek")
        if hours is None and isinstance(personality, QuizResult):
            hours = personality.scheduling.availability_grid.estimated_hours_per_week()
        availability = Availability(
            hours_per_week=hours or 0.0,
            timezone=_first_present(availability_data, "timezone", default=data.get("timezone", "UTC+0")),
        )

        return cls(
            user_id=str(user_id or _first_present(data, "user_id", "userId", "id", default="")),
            skills=[SkillEntry(skill=s["skill"], proficiency=s.get("proficiency", 3))
                    for s in data.get("skills", [])],
            availability=availability,
            personality=personality,
            onboarding_complete=bool(_first_present(data, "onboarding_complete", "onboardingComplete", default=False)),
        )


@dataclass
class Project:
    """
    A client's request for a team.

    Only required_skills, team_size and experience_level are scored; the
    remaining fields are display metadata.
    """
    id: str
    required_skills: List[str] = field(default_factory=list)
    team_size: int = 1
    title: str = ""
    description: str = ""
    client_id: Optional[str] = None
    experience_level: Optional[ExperienceLevel] = None
    job_type: Optional[str] = None
    payment_type: Optional[str] = None
    payment_amount: Optional[float] = None
    work_location: Optional[str] = None
    estimated_duration: Optional[str] = None
    due_date: Optional[str] = None
    responsibilities: List[str] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.required_skills = [str(s).strip() for s in self.required_skills if str(s).strip()]
        self.team_size = max(1, int(self.team_size or 1))
        if self.experience_level is not None:
            self.experience_level = ExperienceLevel(self.experience_level)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "required_skills": list(self.required_skills),
            "team_size": self.team_size,
            "experience_level": self.experience_level.value if self.experience_level else None,
            "job_type": self.job_type,
            "work_location": self.work_location,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], project_id: Optional[str] = None) -> "Project":
        return cls(
            id=str(project_id or data.get("id", "")),
            required_skills=list(_first_present(data, "required_skills", "requiredSkills", default=[])),
            team_size=_first_present(data, "team_size", "teamSize", default=1),
            title=data.get("title", ""),
            description=data.get("description", ""),
            client_id=_first_present(data, "client_id", "clientId"),
            experience_level=_first_present(data, "experience_level", "experienceLevel"),
            job_type=_first_present(data, "job_type", "jobType"),
            payment_type=_first_present(data, "payment_type", "paymentType"),
            payment_amount=_first_present(data, "payment_amount", "paymentAmount"),
            work_location=_first_present(data, "work_location", "workLocation"),
            estimated_duration=_first_present(data, "estimated_duration", "estimatedDuration"),
            due_date=_first_present(data, "due_date", "dueDate"),
            responsibilities=list(data.get("responsibilities") or []),
            requirements=list(data.get("requirements") or []),
        )


@dataclass
class CandidateScore:
    """
    Ranking entry for one candidate.

    Attributes:
        freelancer_id: Candidate identifier
        project_score: Fit for the project [0, 100]
        avg_member_score: Mean pairwise score with existing members [0, 100]
        total_score: Weighted blend of the two [0, 100]
    """
    freelancer_id: str
    project_score: int
    avg_member_score: int
    total_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "freelancer_id": self.freelancer_id,
            "project_score": self.project_score,
            "avg_member_score": self.avg_member_score,
            "total_score": self.total_score,
        }


@dataclass
class TeamSuggestion:
    """A candidate subset and its average compatibility [0, 100]."""
    members: List[str]
    avg_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {"members": list(self.members), "avg_score": self.avg_score}


@dataclass
class PairwiseBreakdown:
    """
    Per-dimension detail of a pairwise score.

    mode is "quiz" when both profiles carry a quiz result, else "legacy".
    Terms that do not apply to the mode are None.
    """
    mode: str
    personality: float
    skills: float
    work_style: Optional[float] = None
    scheduling: Optional[float] = None
    availability: Optional[float] = None
    final_score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode,
            "personality": self.personality,
            "work_style": self.work_style,
            "scheduling": self.scheduling,
            "skills": self.skills,
            "availability": self.availability,
            "final_score": self.final_score,
        }


@dataclass
class ProjectBreakdown:
    """Per-term detail of a project fit score."""
    mode: str
    skills: int
    availability: int
    personality: float
    work_style: Optional[float] = None
    final_score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode,
            "skills": self.skills,
            "availability": self.availability,
            "personality": self.personality,
            "work_style": self.work_style,
            "final_score": self.final_score,
        }
