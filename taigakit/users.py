"""User records returned by the Taiga API."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .records import _Record, _date, _dump, _load


@dataclass
class UsersQueryParams:
    """Query parameters for user listings."""

    project: int = 0

    def to_query(self) -> dict[str, Any]:
        """Return the non-empty parameters as a mapping."""
        return _dump(self, omit_empty=True)


@dataclass
class User(_Record):
    """A Taiga user; empty fields are left out when serialised."""

    auth_token: str = field(default="", repr=False)
    accepted_terms: bool = False
    big_photo: str = ""
    bio: str = ""
    color: str = ""
    date_joined: datetime | None = _date()
    email: str = ""
    full_name: str = ""
    full_name_display: str = ""
    gravatar_id: str = ""
    id: int = 0
    is_active: bool = False
    lang: str = ""
    max_memberships_private_projects: int = 0
    max_memberships_public_projects: int = 0
    max_private_projects: int = 0
    max_public_projects: int = 0
    photo: str = ""
    read_new_terms: bool = False
    roles: list[str] = field(default_factory=list)
    theme: str = ""
    timezone: str = ""
    total_private_projects: int = 0
    total_public_projects: int = 0
    username: str = ""
    uuid: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the user from a decoded JSON mapping; the auth token is never read."""
        user = _load(cls, data)
        user.auth_token = ""
        return user

    def to_dict(self) -> dict[str, Any]:
        """Return the user as a JSON-ready mapping without the auth token."""
        data = _dump(self, omit_empty=True)
        data.pop("auth_token", None)
        return data


@dataclass
class Liked(_Record):
    """An object the user is a fan of."""

    assigned_to: int = 0
    assigned_to_extra_info: dict[str, Any] = field(default_factory=dict)
    created_date: datetime | None = _date()
    description: str = ""
    id: int = 0
    is_fan: bool = False
    is_private: bool = False
    is_watcher: bool = False
    logo_small_url: str = ""
    name: str = ""
    project: str = ""
    project_blocked_code: str = ""
    project_is_private: bool = False
    project_name: str = ""
    project_slug: str = ""
    ref: int = 0
    slug: str = ""
    status: int = 0
    status_color: str = ""
    subject: str = ""
    tags_colors: list[Any] = field(default_factory=list)
    total_fans: int = 0
    total_watchers: int = 0
    type: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class Voted(_Record):
    """An object the user has voted for."""

    assigned_to: int = 0
    assigned_to_extra_info: dict[str, Any] = field(default_factory=dict)
    created_date: datetime | None = _date()
    description: str = ""
    id: int = 0
    is_private: bool = False
    is_voter: bool = False
    is_watcher: bool = False
    logo_small_url: str = ""
    name: str = ""
    project: int = 0
    project_blocked_code: str = ""
    project_is_private: bool = False
    project_name: str = ""
    project_slug: str = ""
    ref: int = 0
    slug: str = ""
    status: str = ""
    status_color: str = ""
    subject: str = ""
    tags_colors: list[Any] = field(default_factory=list)
    total_voters: int = 0
    total_watchers: int = 0
    type: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class Watched(_Record):
    """An object the user is watching."""

    assigned_to: int = 0
    assigned_to_extra_info: dict[str, Any] = field(default_factory=dict)
    created_date: datetime | None = _date()
    description: str = ""
    id: int = 0
    is_private: bool = False
    is_voter: bool = False
    is_watcher: bool = False
    logo_small_url: str = ""
    name: str = ""
    project: int = 0
    project_blocked_code: str = ""
    project_is_private: bool = False
    project_name: str = ""
    project_slug: str = ""
    ref: int = 0
    slug: str = ""
    status: str = ""
    status_color: str = ""
    subject: str = ""
    tags_colors: list[Any] = field(default_factory=list)
    total_voters: int = 0
    total_watchers: int = 0
    type: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class UserWatched(_Record):
    """A watched object as listed for a user."""

    assigned_to: int = 0
    assigned_to_extra_info: dict[str, Any] = field(default_factory=dict)
    created_date: datetime | None = _date()
    description: str = ""
    id: int = 0
    is_private: bool = False
    is_voter: bool = False
    is_watcher: bool = False
    logo_small_url: str = ""
    name: str = ""
    project: int = 0
    project_blocked_code: str = ""
    project_is_private: bool = False
    project_name: str = ""
    project_slug: str = ""
    ref: int = 0
    slug: str = ""
    status: str = ""
    status_color: str = ""
    subject: str = ""
    tags_colors: list[Any] = field(default_factory=list)
    total_voters: int = 0
    total_watchers: int = 0
    type: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class UserLiked(_Record):
    """A liked object as listed for a user."""

    assigned_to: int = 0
    assigned_to_extra_info: dict[str, Any] = field(default_factory=dict)
    created_date: datetime | None = _date()
    description: str = ""
    id: int = 0
    is_fan: bool = False
    is_private: bool = False
    is_watcher: bool = False
    logo_small_url: str = ""
    name: str = ""
    project: int = 0
    project_blocked_code: str = ""
    project_is_private: bool = False
    project_name: str = ""
    project_slug: str = ""
    ref: int = 0
    slug: str = ""
    status: int = 0
    status_color: str = ""
    subject: str = ""
    tags_colors: list[Any] = field(default_factory=list)
    total_fans: int = 0
    total_watchers: int = 0
    type: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class UserStatsDetail(_Record):
    """Summary statistics of a user."""

    roles: list[str] = field(default_factory=list)
    total_num_closed_userstories: int = 0
    total_num_contacts: int = 0
    total_num_projects: int = 0

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class UserContactDetail(_Record):
    """A contact of a user."""

    big_photo: str = ""
    bio: str = ""
    color: str = ""
    full_name: str = ""
    full_name_display: str = ""
    gravatar_id: str = ""
    id: int = 0
    is_active: bool = False
    lang: str = ""
    photo: str = ""
    roles: list[str] = field(default_factory=list)
    theme: str = ""
    timezone: str = ""
    username: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)