"""Plain records returned by or sent to the Taiga API."""

from dataclasses import MISSING, dataclass, field, fields, is_dataclass
from datetime import datetime
from typing import Any, Callable, Mapping


def _parse_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    text = str(value)
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _format_datetime(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def _field(
    default: Any = MISSING,
    *,
    key: str | None = None,
    parse: Callable[[Any], Any] | None = None,
    omitempty: bool = False,
    factory: Callable[[], Any] | None = None,
) -> Any:
    metadata = {"json": key, "parse": parse, "omitempty": omitempty}
    if factory is not None:
        return field(default_factory=factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _date(**kwargs: Any) -> Any:
    return _field(None, parse=_parse_datetime, **kwargs)


def _key(f: Any) -> str:
    return f.metadata.get("json") or f.name


def _load(cls: type, data: Mapping[str, Any] | None) -> Any:
    data = data or {}
    kwargs = {}
    for f in fields(cls):
        value = data.get(_key(f))
        if value is None:
            continue
        parse = f.metadata.get("parse")
        kwargs[f.name] = parse(value) if parse else value
    return cls(**kwargs)


def _dump(obj: Any, omit_empty: bool = False) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if is_dataclass(value):
            value = _dump(value)
        elif isinstance(value, datetime):
            value = _format_datetime(value)
        if (omit_empty or f.metadata.get("omitempty")) and not value:
            continue
        out[_key(f)] = value
    return out


class _Record:
    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)

    def to_dict(self):
        """Return the record as a JSON-ready mapping."""
        return _dump(self)


@dataclass
class Resolver(_Record):
    """Object IDs resolved from slugs and refs."""

    project: int = 0
    user_story: int = _field(0, key="us")
    issue: int = 0
    task: int = 0
    milestone: int = 0
    wiki_page: int = _field(0, key="wikipage")

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class ResolverQueryParams:
    """Query parameters for the resolver endpoint."""

    project: str = ""
    issue: int = 0
    task: int = 0
    milestone: str = ""
    wiki_page: str = _field("", key="wikipage")
    user_story: int = _field(0, key="us")

    def to_query(self) -> dict[str, Any]:
        """Return the non-empty parameters as a mapping."""
        return _dump(self, omit_empty=True)


@dataclass
class DiscoverStats(_Record):
    """Public project statistics."""

    @dataclass
    class Projects(_Record):
        total: int = 0

    projects: Projects = _field(factory=Projects, parse=Projects.from_dict)

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class SystemStats(_Record):
    """Instance-wide statistics."""

    @dataclass
    class Projects(_Record):
        average_last_five_working_days: float = 0.0
        average_last_seven_days: float = 0.0
        percent_with_backlog: float = 0.0
        percent_with_backlog_and_kanban: float = 0.0
        percent_with_kanban: float = 0.0
        today: int = 0
        total: int = 0
        total_with_backlog: int = 0
        total_with_backlog_and_kanban: int = 0
        total_with_kanban: int = 0

    @dataclass
    class Users(_Record):
        average_last_five_working_days: float = 0.0
        average_last_seven_days: float = 0.0
        counts_last_year_per_week: dict[str, int] = field(default_factory=dict)
        today: int = 0
        total: int = 0

    @dataclass
    class UserStories(_Record):
        average_last_five_working_days: float = 0.0
        average_last_seven_days: float = 0.0
        today: int = 0
        total: int = 0

    projects: Projects = _field(factory=Projects, parse=Projects.from_dict)
    users: Users = _field(factory=Users, parse=Users.from_dict)
    userstories: UserStories = _field(factory=UserStories, parse=UserStories.from_dict)

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class TaskStatus(_Record):
    """A task status of a project."""

    color: str = ""
    id: int = 0
    is_closed: bool = False
    name: str = ""
    order: int = 0
    project_id: int = 0
    slug: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class UserStoryStatus(_Record):
    """A user story status of a project."""

    color: str = ""
    id: int = 0
    is_archived: bool = False
    is_closed: bool = False
    name: str = ""
    order: int = 0
    project_id: int = 0
    slug: str = ""
    wip_limit: int = 0

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class TaskCustomAttribute(_Record):
    """A custom attribute defined for tasks."""

    created_date: datetime | None = _date()
    description: str = ""
    extra: Any = None
    id: int = 0
    modified_date: datetime | None = _date()
    name: str = ""
    order: int = 0
    project_id: int = 0
    type: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class UserStoryCustomAttribute(_Record):
    """A custom attribute defined for user stories."""

    created_date: datetime | None = _date()
    description: str = ""
    extra: Any = None
    id: int = 0
    modified_date: datetime | None = _date()
    name: str = ""
    order: int = 0
    project_id: int = 0
    type: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)


@dataclass
class Webhook(_Record):
    """A project webhook; empty fields are left out when serialised."""

    id: int = _field(0, omitempty=True)
    key: str = _field("", omitempty=True)
    logs_counter: int = _field(0, omitempty=True)
    name: str = _field("", omitempty=True)
    project: int = _field(0, omitempty=True)
    url: str = _field("", omitempty=True)

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)

    def to_dict(self):
        """Return the webhook as a JSON-ready mapping without empty fields."""
        return _dump(self)


@dataclass
class WebhookLog(_Record):
    """A record of one webhook delivery."""

    @dataclass
    class RequestData(_Record):
        @dataclass
        class By(_Record):
            id: int = 0
            photo: str = ""
            username: str = ""
            full_name: str = ""
            permalink: str = ""
            gravatar_id: str = ""

        @dataclass
        class Data(_Record):
            test: str = ""

        by: By = _field(factory=By, parse=By.from_dict)
        data: Data = _field(factory=Data, parse=Data.from_dict)
        date: datetime | None = _date()
        type: str = ""
        action: str = ""

    @dataclass
    class RequestHeaders(_Record):
        content_type: str = _field("", key="Content-Type")
        content_length: str = _field("", key="Content-Length")
        x_hub_signature: str = _field("", key="X-Hub-Signature")
        x_taiga_webhook_signature: str = _field("", key="X-TAIGA-WEBHOOK-SIGNATURE")

    @dataclass
    class ResponseHeaders(_Record):
        date: str = _field("", key="Date")
        vary: str = _field("", key="Vary")
        pragma: str = _field("", key="Pragma")
        server: str = _field("", key="Server")
        expires: str = _field("", key="Expires")
        connection: str = _field("", key="Connection")
        set_cookie: str = _field("", key="Set-Cookie")
        content_type: str = _field("", key="Content-Type")
        cache_control: str = _field("", key="Cache-Control")
        referrer_policy: str = _field("", key="Referrer-Policy")
        transfer_encoding: str = _field("", key="Transfer-Encoding")
        access_control_allow_origin: str = _field("", key="Access-Control-Allow-Origin")
        access_control_expose_headers: str = _field("", key="Access-Control-Expose-Headers")

    id: int = 0
    webhook: int = 0
    url: str = ""
    status: int = 0
    request_data: RequestData = _field(factory=RequestData, parse=RequestData.from_dict)
    request_headers: RequestHeaders = _field(
        factory=RequestHeaders, parse=RequestHeaders.from_dict
    )
    response_data: str = ""
    response_headers: ResponseHeaders = _field(
        factory=ResponseHeaders, parse=ResponseHeaders.from_dict
    )
    duration: float = 0.0
    created: datetime | None = _date()
    error_message: str = _field("", key="_error_message", omitempty=True)

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)

    def to_dict(self):
        """Return the log as a JSON-ready mapping."""
        return _dump(self)


@dataclass
class WebhookQueryParameters:
    """Query parameters for webhook listings."""

    project_id: int = _field(0, key="project")
    webhook_id: int = _field(0, key="webhook")

    def to_query(self) -> dict[str, Any]:
        """Return the non-empty parameters as a mapping."""
        return _dump(self, omit_empty=True)


@dataclass
class WikiPage(_Record):
    """A wiki page of a project."""

    content: str = ""
    created_date: datetime | None = _date()
    editions: int = 0
    html: str = ""
    id: int = 0
    is_watcher: bool = False
    last_modifier: int = 0
    modified_date: datetime | None = _date()
    owner: int = 0
    project: int = 0
    project_extra_info: dict[str, Any] = field(default_factory=dict)
    slug: str = ""
    total_watchers: int = 0
    version: int = 0

    @classmethod
    def from_dict(cls, data):
        """Build the record from a decoded JSON mapping."""
        return _load(cls, data)