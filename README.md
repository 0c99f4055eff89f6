# taigakit

A small Python client for the Taiga project management REST API. It covers
tasks, user stories, webhooks and their logs, object resolution, site
statistics and attachment uploads. Responses come back as Python dataclasses.

## Installation

```
pip install taigakit
```

## Connecting

Every service sends its requests through one `Transport`. A `Transport`
holds the base URL of the Taiga server, the auth token and a
`requests.Session`. The token is sent as a `Bearer` Authorization header.

```python
from taigakit.transport import Transport

transport = Transport("http://localhost:9000", token="token")
transport.make_url("epics", "5")
# 'http://localhost:9000/api/v1/epics/5'
```

A request whose status is not 200, 201, 202 or 204 raises
`taigakit.transport.TaigaError`. Its message holds the body of the server's
response, and its `status_code` attribute holds the status. A network failure
also raises `TaigaError`.

`encode_query` turns a mapping into a query string, sorted by key, with list
values repeating their key.

## Tasks and user stories

```python
from taigakit.tasks import Task, TaskService
from taigakit.user_stories import UserStoryService
from taigakit.user_story_models import UserStory

tasks = TaskService(transport, "tasks", default_project_id=2)
stories = UserStoryService(transport, "userstories", default_project_id=2, tasks=tasks)

story = stories.create(UserStory(project=2, subject="Write the docs"))
stories.create_related_task(story, Task(subject="Draft the outline"))
for task in stories.list_related_tasks(story.id):
    print(task.ref, task.subject)

story.description = "Covers the public API"
story = stories.edit(story)
```

- `list` takes an optional query-parameter object (`TasksQueryParams`,
  `UserStoryQueryParams`). Without one it filters by the default project, if
  one was given.
- `create` raises `ValueError` when the project or the subject is missing.
- `edit` first fetches the object to take its current version from the
  server. This follows Taiga's optimistic concurrency control. It raises
  `ValueError` when the story has no ID.
- `get_by_ref` takes a `project_id` or a `project_slug`. The ID is preferred
  when both are given, and `ValueError` is raised when neither is.
- `clone` creates a new user story from an existing one's fields.
- Each returned `Task` and `UserStory` keeps the full JSON object from the
  server in its `detail` attribute.

## Webhooks, resolver and stats

```python
from taigakit.records import ResolverQueryParams, Webhook, WebhookQueryParameters
from taigakit.services import ResolverService, StatsService, WebhookService

hooks = WebhookService(transport, "webhooks", "webhooklogs", default_project_id=2)
hook = hooks.create_webhook(
    Webhook(name="ci", project=2, url="https://hooks.example.com/ci", key="secret")
)
log = hooks.test_webhook(hook)
logs = hooks.list_webhook_logs(WebhookQueryParameters(webhook_id=hook.id))

resolver = ResolverService(transport, "resolver")
resolved = resolver.resolve_user_story(ResolverQueryParams(project="my-project", user_story=12))
print(resolved.project, resolved.user_story)

stats = StatsService(transport, "stats")
print(stats.get_discover_stats().projects.total)
```

`list_webhook_logs` never sends a project filter, even when one is set.

## Records

`taigakit.records` holds the dataclasses for resolver results, statistics,
task and user story statuses, custom attributes, webhooks, webhook logs and
wiki pages. `taigakit.users` holds user records (`User`, `Liked`, `Voted`,
`Watched` and others). Each has a `from_dict` class method that builds it
from decoded JSON and parses date strings into `datetime` objects.

## Attachments

```python
from taigakit.wiki import WikiService

tasks.create_attachment("notes/design.pdf", task)
WikiService(transport, "wiki").create_attachment("diagram.png", wiki_page)
```

The file is sent as multipart form data with the object's ID and project. The
attachment data from the server comes back as a dict. A file that cannot be
opened raises `TaigaError`.

## What it does not do

- It does not log in. You must get an auth token yourself and pass it to
  `Transport`. It does not refresh tokens.
- It has no services for projects, epics, issues, milestones or users. The
  user records can be built from JSON, but nothing here fetches them.
- It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```