import pytest

from taigakit.user_story_models import (
    IssueFiltersDataDetail,
    UserStory,
    UserStoryNestedTask,
    UserStoryOrigin,
    UserStoryQueryParams,
)


def test_user_story_from_dict_reads_fields_and_keeps_detail():
    data = {
        "id": 7,
        "ref": 3,
        "version": 2,
        "project": 4,
        "subject": "Write docs",
        "tags": [["docs", None], ["ui", "#fff"]],
        "watchers": [1, 2],
        "total_points": 5.5,
    }
    story = UserStory.from_dict(data)
    assert story.id == 7
    assert story.ref == 3
    assert story.version == 2
    assert story.project == 4
    assert story.subject == "Write docs"
    assert story.tags == [["docs", None], ["ui", "#fff"]]
    assert story.watchers == [1, 2]
    assert story.detail == data


def test_user_story_from_none_gives_defaults():
    story = UserStory.from_dict(None)
    assert story == UserStory()
    assert story.detail == {}


def test_user_story_null_values_fall_back_to_defaults():
    story = UserStory.from_dict({"milestone": None, "subject": "s", "project": 1})
    assert story.milestone == 0
    assert story.subject == "s"


def test_payload_always_has_project_and_subject():
    payload = UserStory().to_payload()
    assert payload == {"project": 0, "subject": ""}


def test_payload_leaves_out_empty_fields_and_detail():
    story = UserStory(project=2, subject="Plan", description="text", is_blocked=True)
    story.detail = {"id": 99}
    payload = story.to_payload()
    assert payload == {
        "project": 2,
        "subject": "Plan",
        "description": "text",
        "is_blocked": True,
    }


def test_payload_round_trip():
    story = UserStory(
        id=5,
        ref=1,
        version=3,
        project=2,
        subject="Plan",
        tags=[["a", "#000"]],
        watchers=[4],
        points={"1": 2},
    )
    again = UserStory.from_dict(story.to_payload())
    assert again == story


@pytest.mark.parametrize("tags", [["plain"], [("t", "c")]])
def test_tags_are_normalised_to_lists(tags):
    story = UserStory.from_dict({"tags": tags})
    assert all(isinstance(tag, list) for tag in story.tags)
    assert [tag[0] for tag in story.tags] == [t if isinstance(t, str) else t[0] for t in tags]


def test_user_story_origin_from_dict():
    origin = UserStoryOrigin.from_dict({"id": 11, "ref": 12, "subject": "Bug"})
    assert origin == UserStoryOrigin(id=11, ref=12, subject="Bug")


def test_nested_task_from_dict():
    task = UserStoryNestedTask.from_dict(
        {"subject": "t", "id": 1, "ref": 2, "is_blocked": True, "status_id": 9, "is_closed": False}
    )
    assert task.status_id == 9
    assert task.is_blocked is True
    assert task.is_iocaine is False


def test_query_params_empty():
    assert UserStoryQueryParams().to_query() == {}


def test_query_params_use_api_keys():
    params = UserStoryQueryParams(
        project=3,
        milestone_is_null=True,
        status_is_archived=True,
        status_is_closed=True,
        tags="a,b",
        include_tasks=True,
        exclude_epic=8,
    )
    assert params.to_query() == {
        "project": 3,
        "milestone__isnull": True,
        "status__is_archived": True,
        "status__is_closed": True,
        "tags": "a,b",
        "include_tasks": True,
        "exclude_epic": 8,
    }


def test_issue_filters_data_nested_lists():
    data = {
        "assigned_to": [{"count": 2, "full_name": "Ann", "id": 1}],
        "owners": [{"count": 1, "full_name": "Bob", "id": 2}],
        "roles": [{"color": "#abc", "count": 3, "id": 4, "name": "Dev", "order": 1}],
        "statuses": [{"color": "#def", "count": 5, "id": 6, "name": "New", "order": 2}],
        "tags": [{"color": None, "count": 1, "name": "ui"}],
        "epics": [{"id": 1, "ref": 2}],
    }
    filters = IssueFiltersDataDetail.from_dict(data)
    assert filters.assigned_to == [IssueFiltersDataDetail.UserCount(count=2, full_name="Ann", id=1)]
    assert filters.owners[0].full_name == "Bob"
    assert filters.roles[0].name == "Dev"
    assert filters.statuses[0].order == 2
    assert filters.tags == [IssueFiltersDataDetail.TagCount(color=None, count=1, name="ui")]
    assert filters.epics == [{"id": 1, "ref": 2}]
    assert filters.assigned_users == []