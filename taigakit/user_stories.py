"""The service for the user stories endpoint."""

from dataclasses import replace
from pathlib import Path

import requests

from .tasks import Task, TaskService, TasksQueryParams
from .transport import Transport, encode_query
from .user_story_models import UserStory, UserStoryQueryParams


class UserStoryService:
    """Lists, creates, edits and deletes user stories."""

    def __init__(
        self,
        transport: Transport,
        endpoint: str = "userstories",
        default_project_id: int = 0,
        tasks: TaskService | None = None,
    ) -> None:
        self.transport = transport
        self.endpoint = endpoint
        self.default_project_id = default_project_id
        self.tasks = (
            tasks
            if tasks is not None
            else TaskService(transport, default_project_id=default_project_id)
        )

    def list(self, params: UserStoryQueryParams | None = None) -> list[UserStory]:
        """List user stories, filtered by params or by the default project."""
        url = self.transport.make_url(self.endpoint)
        if params is not None:
            url = f"{url}?{encode_query(params.to_query())}"
        elif self.default_project_id:
            url = f"{url}?project={self.default_project_id}"
        return [UserStory.from_dict(item) for item in self.transport.get(url) or []]

    def create(self, user_story: UserStory) -> UserStory:
        """Create a user story; project and subject are required."""
        if not user_story.project or not user_story.subject:
            raise ValueError("a mandatory field is missing. See API documentation")
        url = self.transport.make_url(self.endpoint)
        return UserStory.from_dict(self.transport.post(url, user_story.to_payload()))

    def get(self, user_story_id: int) -> UserStory:
        """Fetch a user story by its ID."""
        url = self.transport.make_url(self.endpoint, user_story_id)
        return UserStory.from_dict(self.transport.get(url))

    def get_by_ref(
        self, ref: int, project_id: int = 0, project_slug: str = ""
    ) -> UserStory:
        """Fetch a user story by its ref within a project given by ID or slug.

        The project ID is preferred when both are given.
        """
        if project_id:
            query = f"ref={ref}&project={project_id}"
        elif project_slug:
            query = f"ref={ref}&project__slug={project_slug}"
        else:
            raise ValueError("no project ID or slug given")
        url = self.transport.make_url(f"{self.endpoint}/by_ref?{query}")
        return UserStory.from_dict(self.transport.get(url))

    def edit(self, user_story: UserStory) -> UserStory:
        """Patch a user story, sending the version currently stored in Taiga."""
        if not user_story.id:
            raise ValueError("passed UserStory does not have an ID yet. Does it exist?")
        remote = self.get(user_story.id)
        payload = replace(user_story, version=remote.version).to_payload()
        url = self.transport.make_url(self.endpoint, user_story.id)
        return UserStory.from_dict(self.transport.patch(url, payload))

    def delete(self, user_story_id: int) -> requests.Response:
        """Delete a user story by its ID."""
        return self.transport.delete(self.transport.make_url(self.endpoint, user_story_id))

    def create_attachment(self, file_path: str | Path, user_story: UserStory) -> dict:
        """Upload a file as an attachment of the user story."""
        url = self.transport.make_url(self.endpoint, "attachments")
        return self.transport.upload(url, file_path, user_story.id, user_story.project)

    def clone(self, user_story: UserStory) -> UserStory:
        """Create a new user story from an existing one's fields."""
        return self.create(replace(user_story, id=0, ref=0, version=0))

    def list_related_tasks(self, user_story_id: int) -> list[Task]:
        """List the tasks that belong to a user story."""
        return self.tasks.list(TasksQueryParams(user_story=user_story_id))

    def create_related_task(self, user_story: UserStory, task: Task) -> Task:
        """Create a task within the user story and its project."""
        related = replace(task, user_story=user_story.id, project=user_story.project)
        return self.tasks.create(related)