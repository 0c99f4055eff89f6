"""User story records and query parameters."""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .records import _Record, _dump, _field, _load


def _parse_tags(value: Any) -> list[list[Any]]:
    tags: list[list[Any]] = []
    for item in value or []:
        if isinstance(item, (list, tuple)):
            tags.append(list(item))
        elif item is not None:
            tags.append([str(item)])
    return tags


def _list_of(cls: type) -> Callable[[Any], list[Any]]:
    def parse(items: Any) -> list[Any]:
        return [cls.from_dict(item) for item in items or []]

    return parse


@dataclass
class UserStory(_Record):
    """A user story; ``detail`` keeps the full object Taiga returned.

    Empty fields are left out of the payload, except project and subject.
    """

    id: int = _field(0, omitempty=True)
    ref: int = _field(0, omitempty=True)
    version: int = _field(0, omitempty=True)
    assigned_to: int = _field(0, omitempty=True)
    backlog_order: int = _field(0, omitempty=True)
    blocked_note: str = _field("", omitempty=True)
    client_requirement: bool = _field(False, omitempty=True)
    description: str = _field("", omitempty=True)
    is_blocked: bool = _field(False, omitempty=True)
    is_closed: bool = _field(False, omitempty=True)
    kanban_order: int = _field(0, omitempty=True)
    milestone: int = _field(0, omitempty=True)
    points: dict[str, Any] = _field(factory=dict, omitempty=True)
    project: int = 0
    sprint_order: int = _field(0, omitempty=True)
    status: int = _field(0, omitempty=True)
    subject: str = ""
    tags: list[list[Any]] = _field(factory=list, parse=_parse_tags, omitempty=True)
    team_requirement: bool = _field(False, omitempty=True)
    watchers: list[int] = _field(factory=list, omitempty=True)
    detail: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserStory":
        """Build a user story from a decoded JSON object, keeping the raw data."""
        source = dict(data or {})
        source.pop("detail", None)
        story = _load(cls, source)
        story.detail = source
        return story

    def to_payload(self) -> dict[str, Any]:
        """Return the fields to send to Taiga as a JSON-ready mapping."""
        payload = _dump(self)
        payload.pop("detail", None)
        return payload


@dataclass
class UserStoryOrigin(_Record):
    """The minimal reference to the object a user story came from."""

    id: int = 0
    ref: int = 0
    subject: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserStoryOrigin":
        """Build an origin reference from a decoded JSON object."""
        return _load(cls, dict(data or {}))


@dataclass
class UserStoryNestedTask(_Record):
    """A task nested in a user story listing when tasks are included."""

    subject: str = ""
    id: int = 0
    ref: int = 0
    is_blocked: bool = False
    is_iocaine: bool = False
    status_id: int = 0
    is_closed: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserStoryNestedTask":
        """Build a nested task from a decoded JSON object."""
        return _load(cls, dict(data or {}))


@dataclass
class UserStoryQueryParams:
    """Query parameters that filter user story listings."""

    project: int = 0
    milestone: int = 0
    milestone_is_null: bool = _field(False, key="milestone__isnull")
    status: int = 0
    status_is_archived: bool = _field(False, key="status__is_archived")
    tags: str = ""
    watchers: int = 0
    assigned_to: int = 0
    epic: int = 0
    role: int = 0
    status_is_closed: bool = _field(False, key="status__is_closed")
    include_attachments: bool = False
    include_tasks: bool = False
    exclude_status: int = 0
    exclude_tags: int = 0
    exclude_assigned_to: int = 0
    exclude_role: int = 0
    exclude_epic: int = 0

    def to_query(self) -> dict[str, Any]:
        """Return the non-empty parameters as a mapping."""
        return _dump(self, omit_empty=True)


@dataclass
class IssueFiltersDataDetail(_Record):
    """Filter options with counts offered for a project's objects."""

    @dataclass
    class UserCount(_Record):
        count: int = 0
        full_name: str = ""
        id: int = 0

    @dataclass
    class OptionCount(_Record):
        color: str = ""
        count: int = 0
        id: int = 0
        name: str = ""
        order: int = 0

    @dataclass
    class TagCount(_Record):
        color: Any = None
        count: int = 0
        name: str = ""

    assigned_to: list[UserCount] = _field(factory=list, parse=_list_of(UserCount))
    assigned_users: list[UserCount] = _field(factory=list, parse=_list_of(UserCount))
    epics: list[dict[str, Any]] = field(default_factory=list)
    owners: list[UserCount] = _field(factory=list, parse=_list_of(UserCount))
    roles: list[OptionCount] = _field(factory=list, parse=_list_of(OptionCount))
    statuses: list[OptionCount] = _field(factory=list, parse=_list_of(OptionCount))
    tags: list[TagCount] = _field(factory=list, parse=_list_of(TagCount))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "IssueFiltersDataDetail":
        """Build the filter data from a decoded JSON object."""
        return _load(cls, dict(data or {}))