import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from jarc.config import APP_ID_PATTERN, Platform

APP_ID_RE = re.compile(APP_ID_PATTERN)


def validate_name(name: Optional[str]) -> Optional[str]:
    """
    Check the project name.

    The name is used as the project directory name, created in the
    current directory, so it can't be a path.

    :param name: Project name as entered by the user.
    :return: Error message, or None if the name is valid.
    """
    if not name or not name.strip():
        return "The name can't be empty."
    if "/" in name or "\\" in name or name.strip() in (".", ".."):
        return "The name must be a directory name, not a path."
    return None


def validate_app_id(app_id: Optional[str]) -> Optional[str]:
    """
    Check the package identifier.

    The identifier must be in reverse-domain format with at least two
    segments, each starting with a letter or underscore (eg. com.example.app).

    :param app_id: Package identifier as entered by the user.
    :return: Error message, or None if the identifier is valid.
    """
    if not app_id or not APP_ID_RE.match(app_id):
        return "Invalid package ID format (eg. com.example.app)"
    return None


def default_app_id(name: str) -> str:
    """
    Suggest a package identifier for a project name.

    The name is lower-cased and stripped of everything except ASCII
    letters and digits. If nothing usable is left, "app" is used instead.

    >>> default_app_id("My App!")
    'com.example.myapp'
    """
    segment = re.sub(r"[^a-z0-9]", "", name.lower())
    if not segment or segment[0].isdigit():
        segment = "app" + segment
    return f"com.example.{segment}"


class Answers(BaseModel):
    """
    Answers collected by the project creation wizard.

    Attributes:
    * `name`: Project name, also used as the project directory name.
    * `app_id`: Package identifier in reverse-domain format.
    * `platforms`: Native platforms to add.
    * `plugins`: Plugin packages to install, in the order selected.
    """

    name: str
    app_id: str
    platforms: set[Platform] = Field(default_factory=set)
    plugins: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        error = validate_name(v)
        if error:
            raise ValueError(error)
        return v.strip()

    @field_validator("app_id")
    @classmethod
    def check_app_id(cls, v: str) -> str:
        error = validate_app_id(v)
        if error:
            raise ValueError(error)
        return v

    @field_validator("plugins")
    @classmethod
    def dedupe_plugins(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(p.strip() for p in v if p.strip()))

    def has_platform(self, platform: Platform) -> bool:
        return platform in self.platforms

    @property
    def ordered_platforms(self) -> list[Platform]:
        """Selected platforms in a stable order (Android first)."""
        return [p for p in Platform if p in self.platforms]


__all__ = ["Answers", "default_app_id", "validate_app_id", "validate_name"]
