"""
Models for the payloads returned by the ClassCharts student API.

Every endpoint answers with `{"success": 1, "data": ..., "meta": ...}`. The
`data`/`meta` pair is modelled by `SuccessResponse[Data, Meta]`, the per
endpoint aliases live at the bottom of each section.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Generic, Optional, TypeVar, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    StrictBool,
    StrictStr,
    conint,
)

DataT = TypeVar("DataT")
MetaT = TypeVar("MetaT")

# Upstream ids and counters are unsigned, anything else is schema drift
StrictCount = conint(strict=True, ge=0)


def _parse_yes_no(value: Any) -> bool:
    if value == "yes":
        return True
    if value == "no":
        return False
    raise ValueError(f"expected a string containing 'yes' or 'no', got {value!r}")


def _mapping_or_empty_array(value: Any) -> Any:
    # ClassCharts sends `[]` instead of `{}` when there is nothing to report
    if isinstance(value, list):
        if not value:
            return {}
        raise ValueError("expected an object or an empty array")
    return value


YesNoBool = Annotated[
    bool,
    PlainValidator(_parse_yes_no),
    PlainSerializer(lambda value: "yes" if value else "no", return_type=str),
]

LastId = Union[StrictBool, StrictCount]
LateMinutes = Union[StrictStr, StrictCount]
PurchasedCount = Union[StrictStr, StrictCount]


class ClassChartsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Empty(ClassChartsModel):
    pass


class SessionCookie(BaseModel):
    """JSON body of the `student_session_credentials` cookie set on login."""

    session_id: str


class StatusResponse(BaseModel):
    """The two fields every response carries, decoded before the full payload."""

    model_config = ConfigDict(strict=True)

    success: StrictCount
    error: Optional[str] = None


class SuccessResponse(ClassChartsModel, Generic[DataT, MetaT]):
    data: DataT
    meta: MetaT


# =============================================================================
# Student
# =============================================================================


class Student(ClassChartsModel):
    id: int
    name: str
    first_name: str
    last_name: str
    avatar_url: str
    display_behaviour: bool
    display_parent_behaviour: bool
    display_homework: bool
    display_rewards: bool
    display_detentions: bool
    display_report_cards: bool
    display_classes: bool
    display_announcements: bool
    display_attendance: bool
    display_attendance_type: str
    display_attendance_percentage: bool
    display_activity: bool
    display_mental_health: bool
    display_timetable: bool
    is_disabled: bool
    display_two_way_communications: bool
    display_absences: bool
    can_upload_attachments: bool
    display_event_badges: bool
    display_avatars: bool
    display_concern_submission: bool
    display_custom_fields: bool
    pupil_concerns_help_text: str
    allow_pupils_add_timetable_notes: bool
    announcements_count: int
    messages_count: int
    pusher_channel_name: str
    has_birthday: bool
    has_new_survey: bool
    survey_id: Optional[int] = None
    detention_alias_plural_uc: str


class StudentInfoData(ClassChartsModel):
    user: Student


class StudentInfoMeta(ClassChartsModel):
    version: str


class SessionMeta(ClassChartsModel):
    session_id: str


StudentInfoResponse = SuccessResponse[StudentInfoData, StudentInfoMeta]
SessionResponse = SuccessResponse[StudentInfoData, SessionMeta]


# =============================================================================
# Activity
# =============================================================================


class ActivityStyle(ClassChartsModel):
    border_color: Optional[str] = None
    custom_class: Optional[str] = None


class ActivityPoint(ClassChartsModel):
    id: StrictCount
    point_type: str = Field(alias="type")
    polarity: str
    reason: str
    score: int
    timestamp: str
    timestamp_custom_time: Optional[str] = None
    style: ActivityStyle
    pupil_name: str
    lesson_name: Optional[str] = None
    teacher_name: str
    room_name: Optional[str] = None
    note: Optional[str] = None
    can_delete: bool = Field(alias="_can_delete")
    badges: Optional[str] = None
    detention_date: Optional[str] = None
    detention_time: Optional[str] = None
    detention_location: Optional[str] = None
    detention_type: Optional[str] = None


class ActivityMeta(ClassChartsModel):
    start_date: str
    end_date: str
    step_size: str
    # `false` once there is nothing left to page through
    last_id: Optional[LastId] = None
    detention_alias_uc: str


ActivityResponse = SuccessResponse[list[ActivityPoint], ActivityMeta]


# =============================================================================
# Announcements
# =============================================================================


class AnnouncementAttachment(ClassChartsModel):
    filename: str
    url: str


class Announcement(ClassChartsModel):
    id: int
    title: str
    description: Optional[str] = None
    school_name: str
    teacher_name: str
    school_logo: Optional[str] = None
    sticky: YesNoBool
    state: Optional[str] = None
    timestamp: str
    attachments: list[AnnouncementAttachment]
    for_pupils: list[Any]
    comment_visibility: str
    allow_comments: YesNoBool
    allow_reactions: YesNoBool
    allow_consent: YesNoBool
    priority_pinned: YesNoBool
    requires_consent: YesNoBool
    can_change_consent: bool
    consent: Optional[Any] = None
    pupil_consents: list[Any]


AnnouncementsResponse = SuccessResponse[list[Announcement], list[Empty]]


# =============================================================================
# Attendance
# =============================================================================


class AttendancePeriodStatus(str, Enum):
    PRESENT = "present"
    IGNORE = "ignore"


class AttendancePeriod(ClassChartsModel):
    code: str
    status: AttendancePeriodStatus
    late_minutes: LateMinutes
    lesson_name: Optional[str] = None
    room_name: Optional[str] = None


class AttendanceMeta(ClassChartsModel):
    dates: list[str]
    sessions: list[str]
    start_date: str
    end_date: Optional[str] = None
    percentage: str
    percentage_since_august: str = Field(alias="percentage_singe_august")


# date -> session name ("AM", "Period 1", ...) -> period
AttendanceData = Annotated[
    dict[str, dict[str, AttendancePeriod]],
    BeforeValidator(_mapping_or_empty_array),
]

AttendanceResponse = SuccessResponse[AttendanceData, AttendanceMeta]


# =============================================================================
# Badges
# =============================================================================


class BadgeTeacher(ClassChartsModel):
    title: str
    first_name: str
    last_name: str


class BadgeBehaviour(ClassChartsModel):
    reason: str
    score: StrictCount
    polarity: str
    timestamp: str
    teacher: BadgeTeacher


class PupilEvent(ClassChartsModel):
    label: str


class PupilBadge(ClassChartsModel):
    timestamp: str
    lesson_pupil_behaviour: BadgeBehaviour
    event: PupilEvent


class Badge(ClassChartsModel):
    id: int
    name: str
    icon: str
    colour: str
    created_date: str
    pupil_badges: list[PupilBadge]
    icon_url: str


BadgesResponse = SuccessResponse[list[Badge], list[Empty]]


# =============================================================================
# Behaviour
# =============================================================================


ReasonCounts = Annotated[dict[str, int], BeforeValidator(_mapping_or_empty_array)]


class BehaviourTimelinePoint(ClassChartsModel):
    positive: int
    negative: int
    name: str
    start: str
    end: str


class BehaviourData(ClassChartsModel):
    timeline: list[BehaviourTimelinePoint]
    positive_reasons: ReasonCounts
    negative_reasons: ReasonCounts
    other_positive: list[str]
    other_negative: list[str]
    other_positive_count: list[dict[str, int]]
    other_negative_count: list[dict[str, int]]


class BehaviourMeta(ClassChartsModel):
    start_date: str
    end_date: str
    step_size: str


BehaviourResponse = SuccessResponse[BehaviourData, BehaviourMeta]


# =============================================================================
# Detentions
# =============================================================================


class DetentionAttended(str, Enum):
    YES = "yes"
    NO = "no"
    UPSCALED = "upscaled"
    PENDING = "pending"


class DetentionSchool(ClassChartsModel):
    opt_notes_names: YesNoBool
    opt_notes_comments: YesNoBool
    opt_notes_comments_pupils: YesNoBool


class DetentionPupil(ClassChartsModel):
    id: int
    first_name: str
    last_name: str
    school: DetentionSchool


class DetentionSubject(ClassChartsModel):
    id: int
    name: str


class DetentionLesson(ClassChartsModel):
    id: int
    name: str
    subject: DetentionSubject


class DetentionBehaviour(ClassChartsModel):
    reason: str


class DetentionTeacher(ClassChartsModel):
    id: int
    first_name: str
    last_name: str
    title: str


class DetentionType(ClassChartsModel):
    name: str


class Detention(ClassChartsModel):
    id: int
    attended: DetentionAttended
    date: Optional[str] = None
    length: Optional[int] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    time: Optional[str] = None
    pupil: DetentionPupil
    lesson: Optional[DetentionLesson] = None
    lesson_pupil_behaviour: DetentionBehaviour
    teacher: Optional[DetentionTeacher] = None
    detention_type: DetentionType


class DetentionsMeta(ClassChartsModel):
    detention_alias_plural: str


DetentionsResponse = SuccessResponse[list[Detention], DetentionsMeta]


# =============================================================================
# Homework
# =============================================================================


class HomeworkState(str, Enum):
    NOT_COMPLETED = "not_completed"
    LATE = "late"
    COMPLETED = "completed"


class DisplayDate(str, Enum):
    DUE_DATE = "due_date"
    ISSUE_DATE = "issue_date"


class HomeworkStatus(ClassChartsModel):
    id: int
    state: Optional[HomeworkState] = None
    mark: Any = None
    mark_relative: int
    ticked: YesNoBool
    allow_attachments: bool
    first_seen_date: Optional[str] = None
    last_seen_date: Optional[str] = None
    attachments: list[Any]
    has_feedback: bool


class ValidatedHomeworkAttachment(ClassChartsModel):
    id: int
    file_name: str
    file: str
    validated_file: str


class Homework(ClassChartsModel):
    lesson: str
    subject: str
    teacher: str
    homework_type: str
    id: int
    title: str
    meta_title: str
    description: str
    issue_date: str
    due_date: str
    completion_time_unit: str
    completion_time_value: str
    publish_time: str
    status: HomeworkStatus
    validated_links: list[Any]
    validated_attachments: list[ValidatedHomeworkAttachment]


class HomeworkMeta(ClassChartsModel):
    start_date: str
    end_date: str
    display_type: DisplayDate
    max_files_allowed: int
    allowed_file_types: list[str]
    this_week_due_count: int
    this_week_outstanding_count: int
    this_week_completed_count: int
    allow_attachments: bool
    display_marks: bool


HomeworksResponse = SuccessResponse[list[Homework], HomeworkMeta]


# =============================================================================
# Lessons (timetable)
# =============================================================================


class Lesson(ClassChartsModel):
    teacher_name: str
    lesson_id: Optional[int] = None
    lesson_name: str
    subject_name: str
    is_alternative_lesson: bool
    period_name: str
    period_number: str
    room_name: str
    date: str
    start_time: str
    end_time: str
    key: int
    note_abstract: str
    note: str
    pupil_note_abstract: str
    pupil_note: str
    pupil_note_raw: str


class LessonPeriod(ClassChartsModel):
    number: str
    start_time: str
    end_time: str


class LessonsMeta(ClassChartsModel):
    dates: list[str]
    timetable_dates: list[str]
    periods: list[LessonPeriod] = Field(default_factory=list)
    start_time: str
    end_time: str


LessonsResponse = SuccessResponse[list[Lesson], LessonsMeta]


# =============================================================================
# Pupil fields
# =============================================================================


class PupilField(ClassChartsModel):
    id: int
    name: str
    graphic: str
    value: str


class PupilFieldsData(ClassChartsModel):
    note: str
    fields: list[PupilField]


PupilFieldsResponse = SuccessResponse[PupilFieldsData, list[Empty]]


# =============================================================================
# Rewards
# =============================================================================


class RewardItem(ClassChartsModel):
    id: int
    name: str
    description: str
    photo: str
    price: int
    stock_control: bool
    stock: int
    can_purchase: bool
    unable_to_purchase_reason: str
    once_per_pupil: bool
    purchased: bool
    purchased_count: PurchasedCount
    price_balance_difference: int


class RewardsMeta(ClassChartsModel):
    pupil_score_balance: int


class RewardPurchaseData(ClassChartsModel):
    single_purchase: YesNoBool
    order_id: int
    balance: int


RewardsResponse = SuccessResponse[list[RewardItem], RewardsMeta]
RewardPurchaseResponse = SuccessResponse[RewardPurchaseData, list[Empty]]
