import logging

from .activity import Activity
from .announcements import Announcements
from .attendance import Attendance
from .badges import Badges
from .behaviour import Behaviour
from .credentials import AppCredentials, Credentials, EnvCredentials, PathCredentials
from .detentions import Detentions
from .exceptions import (
    ClassChartsAuthenticationError,
    ClassChartsClientCreationError,
    ClassChartsCookieDecodingError,
    ClassChartsCookieParsingError,
    ClassChartsEnvelopeError,
    ClassChartsError,
    ClassChartsException,
    ClassChartsHeaderDecodingError,
    ClassChartsIdentityError,
    ClassChartsMissingSessionCookie,
    ClassChartsParsingError,
    ClassChartsReadError,
    ClassChartsRequestError,
    ClassChartsStatusError,
    ClassChartsTransportError,
)
from .homework import Homeworks
from .lessons import Lessons
from .logger import setup_logger
from .objects import DisplayDate, SuccessResponse
from .pagination import paginate, paginate_all
from .pupilfields import PupilFields
from .rewards import Rewards
from .session import ClassCharts

__all__ = [
    "PathCredentials",
    "EnvCredentials",
    "AppCredentials",
    "Credentials",
    "ClassCharts",
    "SuccessResponse",
    "DisplayDate",
    "Activity",
    "Announcements",
    "Attendance",
    "Badges",
    "Behaviour",
    "Detentions",
    "Homeworks",
    "Lessons",
    "PupilFields",
    "Rewards",
    "paginate",
    "paginate_all",
    "setup_logger",
    # Exceptions
    "ClassChartsException",
    "ClassChartsRequestError",
    "ClassChartsTransportError",
    "ClassChartsReadError",
    "ClassChartsEnvelopeError",
    "ClassChartsError",
    "ClassChartsStatusError",
    "ClassChartsParsingError",
    "ClassChartsClientCreationError",
    "ClassChartsAuthenticationError",
    "ClassChartsMissingSessionCookie",
    "ClassChartsCookieParsingError",
    "ClassChartsHeaderDecodingError",
    "ClassChartsCookieDecodingError",
    "ClassChartsIdentityError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
