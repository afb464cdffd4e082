from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .exceptions import (
    ClassChartsEnvelopeError,
    ClassChartsError,
    ClassChartsParsingError,
    ClassChartsReadError,
    ClassChartsStatusError,
)
from .objects import StatusResponse

if TYPE_CHECKING:  # pragma: no cover
    from requests import Response

    from .session import ClassCharts

__all__ = ["parse_response", "decode_payload", "format_date", "date_params", "ClassChartsResource"]

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

DATE_FORMAT = "%Y-%m-%d"


def parse_response(response: Response) -> str:
    """
    Classifies a ClassCharts response and returns its body untouched on success.

    Only `success` and `error` are decoded here, the caller decodes the text a second
    time into the endpoint's own model.

    Raises:
        ClassChartsReadError: The body could not be read.
        ClassChartsEnvelopeError: The body is not a `{"success": ...}` envelope.
        ClassChartsError: `success != 1` and ClassCharts sent an error message.
        ClassChartsStatusError: `success != 1` without an error message.
    """
    try:
        text = response.text
    except requests.RequestException as e:
        response.close()
        raise ClassChartsReadError(f"Failed to read the response body from {response.url}: {e}") from e

    try:
        status = StatusResponse.model_validate_json(text)
    except ValidationError as e:
        logger.debug(f"Response from {response.url} is not a status envelope (HTTP {response.status_code}): {text[:200]!r}")
        raise ClassChartsEnvelopeError(f"Could not parse the json response from {response.url}") from e

    if status.success != 1:
        if status.error is not None:
            raise ClassChartsError(status.success, status.error)
        raise ClassChartsStatusError(status.success)

    return text


def decode_payload(text: str, model: type[ModelT]) -> ModelT:
    """Decodes a successful envelope into `model`, raising ClassChartsParsingError on schema drift."""
    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        raise ClassChartsParsingError(f"Response did not match {model.__name__}: {e}") from e


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def date_params(from_date: date | None = None, to_date: date | None = None) -> dict[str, str]:
    """Builds the `to`/`from` query parameters shared by the date ranged endpoints."""
    params = {}
    if to_date is not None:
        params["to"] = format_date(to_date)
    if from_date is not None:
        params["from"] = format_date(from_date)
    return params


class ClassChartsResource:
    """Base of the endpoint accessors, holds the client they send their requests through."""

    def __init__(self, client: ClassCharts):
        self.client = client

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.client!r})"
