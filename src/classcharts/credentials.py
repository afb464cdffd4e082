from __future__ import annotations

import os
from abc import ABC
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .exceptions import ClassChartsException

__all__ = ["Credentials", "PathCredentials", "EnvCredentials", "AppCredentials"]


@dataclass
class Credentials(ABC):
    code: str = field(default=None)
    dob: str = field(default=None)
    base_url: str = field(default=None)

    other_info: dict | None = None

    def validate(self) -> None:
        self.code = str(self.code or "").strip()
        self.dob = str(self.dob or "").strip()
        self.base_url = (self.base_url or "").strip()

        error = []
        if not self.code:
            error.append("code")
        if not self.dob:
            error.append("dob")

        if error:
            raise ClassChartsException(f"Please verify and correct these attributes: {error}")

    def __repr__(self) -> str:
        # The access code is as good as a password
        return f"{self.__class__.__name__}(code='****', dob='****', base_url={self.base_url!r})"


@dataclass(repr=False)
class PathCredentials(Credentials):
    """
    Reads `code`, `dob` and optionally `base_url` from a YAML file.

    Any other keys in the file end up in `other_info`.
    """

    filename: str | Path = field(default_factory=lambda: Path.cwd().joinpath("credentials.yml"))

    def __post_init__(self):
        self.filename = Path(self.filename)

        cred_file: dict = yaml.safe_load(self.filename.read_text(encoding="utf8")) or {}
        self.code = cred_file.pop("code", None)
        self.dob = cred_file.pop("dob", None)
        self.base_url = cred_file.pop("base_url", None)

        self.other_info = cred_file


@dataclass(repr=False)
class EnvCredentials(Credentials):
    def __post_init__(self):
        self.code = os.getenv("CLASSCHARTS_CODE")
        self.dob = os.getenv("CLASSCHARTS_DOB")
        self.base_url = os.getenv("CLASSCHARTS_BASE_URL")


@dataclass(repr=False)
class AppCredentials(Credentials):
    def __init__(self, code, dob, base_url=None):
        self.code = code
        self.dob = dob
        self.base_url = base_url
        self.other_info = None
