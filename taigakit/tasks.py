"""Tasks: records and the service for the tasks endpoint."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .records import _Record, _dump, _field, _load
from .transport import Transport, encode_query


def _parse_tags(value: Any) -> list[str]:
    tags = []
    for item in value or []:
        if isinstance(item, (list, tuple)):
            if item and item[0] is not None:
                tags.append(str(item[0]))
        elif item is not None:
            tags.append(str(item))
    return tags


@dataclass
class Task(_Record):
    """A task; ``detail`` keeps the full object Taiga returned."""

    id: int = 0
    ref: int = 0
    version: int = 0
    assigned_to: int = 0
    blocked_note: str = ""
    description: str = ""
    external_reference: Any = None
    is_blocked: bool = False
    is_closed: bool = False
    is_iocaine: bool = False
    milestone: int = 0
    project: int = 0
    status: int = 0
    subject: str = ""
    tags: list[str] = _field(factory=list, parse=_parse_tags)
    taskboard_order: int = 0
    us_order: int = 0
    user_story: int = 0
    watchers: list[int] = field(default_factory=list)
    detail: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Task":
        """Build a task from a decoded JSON object, keeping the raw data."""
        source = dict(data or {})
        source.pop("detail", None)
        task = _load(cls, source)
        task.detail = source
        return task

    def to_payload(self) -> dict[str, Any]:
        """Return the non-empty fields as a JSON-ready mapping."""
        payload = _dump(self, omit_empty=True)
        payload.pop("detail", None)
        return payload


@dataclass
class TaskVoterDetail(_Record):
    """A user who voted for a task."""

    full_name: str = ""
    id: int = 0
    username: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "TaskVoterDetail":
        """Build a voter record from a decoded JSON object."""
        return _load(cls, dict(data or {}))


@dataclass
class TasksQueryParams:
    """Query parameters that filter task listings."""

    project: int = 0
    status: int = 0
    tags: list[str] = field(default_factory=list)
    user_story: int = 0
    role: int = 0
    owner: int = 0
    milestone: int = 0
    watchers: int = 0
    assigned_to: int = 0
    status_is_closed: bool = _field(False, key="status__is_closed")
    exclude_status: int = 0
    exclude_tags: int = 0
    exclude_role: int = 0
    exclude_owner: int = 0
    exclude_assigned_to: int = 0
    include_attachments: bool = False

    def to_query(self) -> dict[str, Any]:
        """Return the non-empty parameters as a mapping."""
        return _dump(self, omit_empty=True)


class TaskService:
    """Lists, creates and fetches tasks."""

    def __init__(
        self,
        transport: Transport,
        endpoint: str = "tasks",
        default_project_id: int = 0,
    ) -> None:
        self.transport = transport
        self.endpoint = endpoint
        self.default_project_id = default_project_id

    def list(self, params: TasksQueryParams | None = None) -> list[Task]:
        """List tasks, filtered by params or by the default project."""
        url = self.transport.make_url(self.endpoint)
        if params is not None:
            url = f"{url}?{encode_query(params.to_query())}"
        elif self.default_project_id:
            url = f"{url}?project={self.default_project_id}"
        return [Task.from_dict(item) for item in self.transport.get(url) or []]

    def create(self, task: Task) -> Task:
        """Create a task; project and subject are required."""
        if not task.project or not task.subject:
            raise ValueError("a mandatory field is missing. See API documentation")
        url = self.transport.make_url(self.endpoint)
        return Task.from_dict(self.transport.post(url, task.to_payload()))

    def get(self, task: Task) -> Task:
        """Fetch a task by its ID."""
        url = self.transport.make_url(self.endpoint, task.id)
        return Task.from_dict(self.transport.get(url))

    def get_by_ref(
        self, task: Task, project_id: int = 0, project_slug: str = ""
    ) -> Task:
        """Fetch a task by its ref within a project given by ID or slug.

        The project ID is preferred when both are given.
        """
        if project_id:
            query = f"ref={task.ref}&project={project_id}"
        elif project_slug:
            query = f"ref={task.ref}&project__slug={project_slug}"
        else:
            raise ValueError("no project ID or slug given")
        url = self.transport.make_url(f"{self.endpoint}/by_ref?{query}")
        return Task.from_dict(self.transport.get(url))

    def create_attachment(self, file_path: str | Path, task: Task) -> dict:
        """Upload a file as an attachment of the task."""
        url = self.transport.make_url(self.endpoint, "attachments")
        return self.transport.upload(url, file_path, task.id, task.project)