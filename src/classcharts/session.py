from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Callable, Optional, Self, TypeVar
from urllib.parse import unquote

import requests
from pydantic import BaseModel, ValidationError
from requests import Request, Session

from .common import decode_payload, parse_response
from .exceptions import (
    ClassChartsAuthenticationError,
    ClassChartsCookieDecodingError,
    ClassChartsCookieParsingError,
    ClassChartsException,
    ClassChartsHeaderDecodingError,
    ClassChartsIdentityError,
    ClassChartsMissingSessionCookie,
    ClassChartsRequestError,
    ClassChartsTransportError,
)
from .objects import SessionCookie, SessionResponse, StudentInfoResponse

if TYPE_CHECKING:  # pragma: no cover
    from requests import PreparedRequest, Response

    from .credentials import Credentials

__all__ = ["ClassCharts", "DEFAULT_BASE_URL", "API_PREFIX", "SESSION_TTL"]

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.classcharts.com"
API_PREFIX = "/apiv2student"
LOGIN_PATH = "/student/login"
SESSION_COOKIE = "student_session_credentials"

# A session id is refreshed once it is older than this
SESSION_TTL = timedelta(minutes=3)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _mask(token: str) -> str:
    return f"{token[:4]}****" if token else "<empty>"


@dataclass
class ClassCharts:
    """
    An authenticated ClassCharts student client.

    Normally created by logging in:

    >>> client = ClassCharts.create("ABCDEF1234", "21/04/2009")
    >>> client.student_id
    '3949234'

    A saved session can be restored by passing the fields directly:

    >>> client = ClassCharts(session_token="...", student_id="3949234", auth_cookies="...")

    The session id is refreshed in place before any request once it is older than
    SESSION_TTL. A client is meant to be used by one caller at a time: the refresh
    itself is serialised by an internal lock, but requests built concurrently may
    still carry a token that is being replaced.
    """

    session_token: str = ""
    student_id: str = ""
    base_url: str = DEFAULT_BASE_URL
    auth_cookies: str = ""
    session_last_refreshed: Optional[datetime] = None
    timeout: Optional[float] = None
    clock: Callable[[], datetime] = field(default=_utcnow, repr=False)
    http: Optional[Session] = field(default=None, repr=False)
    _lock: threading.RLock = field(init=False, default_factory=threading.RLock, repr=False)

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")
        if self.session_last_refreshed is None:
            self.session_last_refreshed = self.clock()
        elif self.session_last_refreshed.tzinfo is None:
            # Naive timestamps are taken to be local time, as `datetime.now()` returns
            self.session_last_refreshed = self.session_last_refreshed.astimezone(timezone.utc)
        if self.http is None:
            self.http = Session()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(for: {self.student_id or '<unknown student>'})"

    # =========================================================================
    # Login
    # =========================================================================

    @classmethod
    def create(
        cls,
        code: str,
        dob: str,
        base_url: str | None = None,
        http: Session | None = None,
        **kwargs: Any,
    ) -> Self:
        """
        Logs in with a student's access code and date of birth (DD/MM/YYYY).

        After logging in the student info is fetched once to learn the student id.

        Raises:
            ClassChartsAuthenticationError: Wrong code/date of birth, or ClassCharts is down.
            ClassChartsMissingSessionCookie: Login did not hand out the session cookie.
            ClassChartsCookieDecodingError, ClassChartsCookieParsingError: The session cookie is malformed.
            ClassChartsHeaderDecodingError: A `set-cookie` header is not valid text.
            ClassChartsIdentityError: The student info could not be fetched after login.
            ClassChartsTransportError: The login request could not be sent.
        """
        base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        http = http or Session()

        login_form = {
            "_method": (None, "POST"),
            "code": (None, str(code).upper()),
            "dob": (None, dob),
            "remember_me": (None, "1"),
            "recaptcha-token": (None, "no-token-available"),
        }
        login_request = Request("POST", f"{base_url}{LOGIN_PATH}", files=login_form)

        logger.debug(f"Logging in at {base_url}{LOGIN_PATH}")
        try:
            response = http.send(login_request.prepare(), allow_redirects=False, timeout=kwargs.get("timeout"))
        except requests.RequestException as e:
            raise ClassChartsTransportError(f"Failed to send the login request: {e}") from e

        set_cookie = response.headers.get("set-cookie")
        if response.status_code != 302 or set_cookie is None:
            logger.debug(f"Login answered with status {response.status_code}, set-cookie present: {set_cookie is not None}")
            raise ClassChartsAuthenticationError()

        session_token = cls._session_id_from_cookies(response)
        auth_cookies = cls._auth_cookie_header(set_cookie)

        client = cls(
            session_token=session_token,
            student_id="",
            base_url=base_url,
            auth_cookies=auth_cookies,
            http=http,
            **kwargs,
        )
        logger.debug(f"Logged in, session id {_mask(session_token)}. Fetching student info.")

        try:
            info = client.get_student_info()
        except ClassChartsRequestError as e:
            raise ClassChartsIdentityError(f"Failed to get student info, error: {e}") from e

        client.student_id = str(info.data.user.id)
        logger.info(f"Logged in as student {client.student_id}")
        return client

    @classmethod
    def start(cls, creds: Credentials, **kwargs: Any) -> Self:
        """Logs in with the code and date of birth held by `creds`."""
        creds.validate()
        return cls.create(creds.code, creds.dob, base_url=creds.base_url or None, **kwargs)

    @staticmethod
    def _session_id_from_cookies(response: Response) -> str:
        cookie = next((c for c in response.cookies if c.name == SESSION_COOKIE), None)
        if cookie is None or cookie.value is None:
            raise ClassChartsMissingSessionCookie("Session cookie does not exist on server returned cookies")

        try:
            value = unquote(cookie.value, errors="strict")
        except UnicodeDecodeError as e:
            raise ClassChartsCookieDecodingError("Failed to decode the cookie") from e

        try:
            return SessionCookie.model_validate_json(value).session_id
        except ValidationError as e:
            raise ClassChartsCookieParsingError("Session cookie cannot be parsed") from e

    @staticmethod
    def _auth_cookie_header(set_cookie: str) -> str:
        try:
            set_cookie.encode("ascii")
        except UnicodeEncodeError as e:
            raise ClassChartsHeaderDecodingError("Could not parse header as a string") from e
        # requests folds repeated set-cookie headers into one, comma separated.
        # Commas inside an `Expires` date are split as well, leaving date fragments in the header.
        return ";".join(set_cookie.split(","))

    # =========================================================================
    # Session freshness
    # =========================================================================

    def session_is_stale(self) -> bool:
        return self.clock() - self.session_last_refreshed > SESSION_TTL

    def ensure_fresh_session(self) -> str:
        """Returns the session id, refreshing it first when it is older than SESSION_TTL."""
        with self._lock:
            if self.session_is_stale():
                logger.debug(f"Session id last refreshed at {self.session_last_refreshed.isoformat()}, refreshing.")
                return self.get_new_session_id()
            return self.session_token

    def get_new_session_id(self) -> str:
        """
        Asks ClassCharts for a new session id and stores it on the client.

        This bypasses `build_request`, so it never triggers itself.
        """
        request = Request(
            "POST",
            self.create_url("/ping"),
            headers=self._auth_headers(),
            data={"include_data": "true"},
        )

        with self._lock:
            text = self.send(request)
            session = decode_payload(text, SessionResponse)

            self.session_token = session.meta.session_id
            self.session_last_refreshed = self.clock()

        logger.debug(f"Refreshed session id: {_mask(self.session_token)}")
        return self.session_token

    # =========================================================================
    # Requests
    # =========================================================================

    def create_url(self, path: str) -> str:
        """Create a full API URL from a path such as `/homeworks/123`."""
        return f"{self.base_url}{API_PREFIX}{path}"

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Cookie": self.auth_cookies,
            "Authorization": f"Basic {self.session_token}",
        }

    def build_request(self, method: str, path: str) -> Request:
        """
        Builds an authenticated request for `path`, refreshing the session first if needed.

        Query parameters (`request.params`) and form bodies (`request.data`) are left for the caller.
        """
        self.ensure_fresh_session()
        return Request(method.upper(), self.create_url(path), headers=self._auth_headers())

    def send(self, request: Request | PreparedRequest) -> str:
        """Sends a request once and returns the body of a successful envelope."""
        prepared = request.prepare() if isinstance(request, Request) else request
        logger.debug(f"{prepared.method} {prepared.url}")

        try:
            response = self.http.send(prepared, allow_redirects=False, stream=True, timeout=self.timeout)
        except requests.RequestException as e:
            raise ClassChartsTransportError(f"Failed to send the request to {prepared.url}: {e}") from e

        return parse_response(response)

    def json(
        self,
        path: str,
        model: type[ModelT],
        method: str = "get",
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> ModelT:
        """Performs a request against the API and decodes the successful envelope into `model`."""
        request = self.build_request(method, path)
        if params:
            request.params = {k: v for k, v in params.items() if v is not None}
        if data is not None:
            request.data = data
        return decode_payload(self.send(request), model)

    def require_student_id(self) -> str:
        if not self.student_id:
            raise ClassChartsException("The student id is unknown, log in with `ClassCharts.create` first.")
        return self.student_id

    def student_path(self, resource: str) -> str:
        """Returns `/<resource>/<student_id>`, the path of every per student endpoint."""
        return f"/{resource}/{self.require_student_id()}"

    # =========================================================================
    # Student
    # =========================================================================

    def get_student_info(self) -> StudentInfoResponse:
        """Gets the logged in student's details and which ClassCharts features they can see."""
        return self.json("/ping", StudentInfoResponse, method="post", data={"include_data": "true"})
