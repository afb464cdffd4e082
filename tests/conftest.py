"""Pytest configuration - a recording stand-in for requests.Session and canned ClassCharts payloads."""

import json
from datetime import datetime, timezone
from typing import Any
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
from requests.cookies import cookiejar_from_dict

from classcharts import ClassCharts

BASE_URL = "https://classcharts.test"
NOW = datetime(2023, 9, 26, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# Fake transport
# =============================================================================


def make_response(
    status: int = 200,
    json_body: Any = None,
    text: str | None = None,
    headers: dict[str, str] | None = None,
    cookies: dict[str, str] | None = None,
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    if json_body is not None:
        text = json.dumps(json_body)
    response._content = (text or "").encode("utf-8")
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    if cookies:
        response.cookies = cookiejar_from_dict(cookies)
    return response


class BrokenBodyResponse(requests.Response):
    """A response whose body fails while being read."""

    def __init__(self):
        super().__init__()
        self.status_code = 200
        self._content_consumed = True

    @property
    def text(self):
        raise requests.exceptions.ChunkedEncodingError("Connection broken: IncompleteRead")


class FakeSession:
    """Answers `send` from canned responses keyed by (method, path) and records every request."""

    def __init__(self):
        self.routes: dict[tuple[str, str], list] = {}
        self.requests: list[requests.PreparedRequest] = []
        self.send_kwargs: list[dict] = []

    def add(self, method: str, path: str, *responses) -> None:
        self.routes.setdefault((method, path), []).extend(responses)

    def send(self, request: requests.PreparedRequest, **kwargs) -> requests.Response:
        self.requests.append(request)
        self.send_kwargs.append(kwargs)

        path = urlsplit(request.url).path
        queue = self.routes.get((request.method, path))
        if not queue:
            raise requests.ConnectionError(f"No route for {request.method} {path}")

        # The last response of a route keeps answering
        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(response, Exception):
            raise response

        response.url = request.url
        response.request = request
        return response

    def calls(self, method: str, path: str) -> list[requests.PreparedRequest]:
        return [r for r in self.requests if r.method == method and urlsplit(r.url).path == path]

    def paths(self) -> list[str]:
        return [urlsplit(r.url).path for r in self.requests]


def query(request: requests.PreparedRequest) -> dict[str, list[str]]:
    return parse_qs(urlsplit(request.url).query)


# =============================================================================
# Payloads
# =============================================================================


STUDENT = {
    "id": 3949234,
    "name": "Name",
    "first_name": "first_name",
    "last_name": "last_name",
    "avatar_url": "https://example.com",
    "display_behaviour": False,
    "display_parent_behaviour": False,
    "display_homework": False,
    "display_rewards": False,
    "display_detentions": False,
    "display_report_cards": False,
    "display_classes": False,
    "display_announcements": True,
    "display_academic_reports": False,
    "display_attendance": True,
    "display_attendance_type": "instance",
    "display_attendance_percentage": False,
    "display_activity": False,
    "display_mental_health": False,
    "display_mental_health_no_tracker": False,
    "display_timetable": False,
    "is_disabled": False,
    "display_two_way_communications": True,
    "display_absences": False,
    "can_upload_attachments": False,
    "display_event_badges": False,
    "display_avatars": False,
    "display_concern_submission": False,
    "display_custom_fields": False,
    "pupil_concerns_help_text": "",
    "allow_pupils_add_timetable_notes": False,
    "detention_alias_plural_uc": "Detentions",
    "announcements_count": 0,
    "messages_count": 0,
    "pusher_channel_name": "pusher_channel_name",
    "has_birthday": False,
    "has_new_survey": False,
    "survey_id": None,
}


def ping_body(session_id: str = "jf99rm23pdi29dj32fh23i") -> dict:
    return {
        "success": 1,
        "data": {"user": STUDENT},
        "meta": {"session_id": session_id, "version": "27.16.2"},
    }


def activity_point(point_id: int) -> dict:
    return {
        "id": point_id,
        "type": "behaviour",
        "polarity": "positive",
        "reason": "Reason",
        "score": 1,
        "timestamp": "2023-04-21 10:00:00",
        "timestamp_custom_time": None,
        "style": {"border_color": None, "custom_class": None},
        "pupil_name": "Pupil Name",
        "lesson_name": "Lesson Name",
        "teacher_name": "Teacher Name",
        "room_name": None,
        "note": None,
        "_can_delete": False,
        "badges": "",
        "detention_date": None,
        "detention_time": None,
        "detention_location": None,
        "detention_type": None,
    }


def activity_body(ids: list[int], last_id: Any = False) -> dict:
    return {
        "success": 1,
        "data": [activity_point(i) for i in ids],
        "meta": {
            "start_date": "2023-08-24T23:00:00+00:00",
            "end_date": "2023-09-24T22:59:59+00:00",
            "last_id": last_id,
            "step_size": "week",
            "detention_alias_uc": "Detention",
        },
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def http() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(http) -> ClassCharts:
    """A client restored from a saved, fresh session."""
    return ClassCharts(
        session_token="session_id",
        student_id="student_id",
        base_url=BASE_URL,
        auth_cookies="auth_cookies",
        session_last_refreshed=NOW,
        clock=lambda: NOW,
        http=http,
    )
