import json

import pytest
import responses

from taigakit.records import ResolverQueryParams, Webhook, WebhookLog, WebhookQueryParameters
from taigakit.services import ResolverService, StatsService, WebhookService
from taigakit.transport import TaigaError, Transport

API = "http://localhost:9000/api/v1"


@pytest.fixture
def transport():
    return Transport("http://localhost:9000", token="token")


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_discover_stats(transport, mocked):
    mocked.add(responses.GET, f"{API}/stats/discover", json={"projects": {"total": 4}})
    stats = StatsService(transport).get_discover_stats()
    assert stats.projects.total == 4
    assert mocked.calls[0].request.headers["Authorization"] == "Bearer token"


def test_system_stats(transport, mocked):
    mocked.add(
        responses.GET,
        f"{API}/stats/system",
        json={
            "projects": {"total": 3, "today": 1, "percent_with_kanban": 0.5},
            "users": {"total": 9, "counts_last_year_per_week": {"1": 2}},
            "userstories": {"total": 12},
        },
    )
    stats = StatsService(transport).get_system_stats()
    assert stats.projects.total == 3
    assert stats.projects.percent_with_kanban == 0.5
    assert stats.users.counts_last_year_per_week == {"1": 2}
    assert stats.userstories.total == 12


def test_stats_error_raises(transport, mocked):
    mocked.add(responses.GET, f"{API}/stats/system", body="not found", status=404)
    with pytest.raises(TaigaError, match="not found") as info:
        StatsService(transport).get_system_stats()
    assert info.value.status_code == 404


def test_resolve_project_sends_only_project(transport, mocked):
    mocked.add(responses.GET, f"{API}/resolver", json={"project": 2})
    params = ResolverQueryParams(project="taigo-test", issue=4)
    result = ResolverService(transport).resolve_project(params)
    assert result.project == 2
    assert mocked.calls[0].request.url == f"{API}/resolver?project=taigo-test"


def test_resolve_user_story(transport, mocked):
    mocked.add(responses.GET, f"{API}/resolver", json={"project": 2, "us": 8})
    params = ResolverQueryParams(project="taigo-test", user_story=3, task=9)
    result = ResolverService(transport).resolve_user_story(params)
    assert (result.project, result.user_story) == (2, 8)
    assert mocked.calls[0].request.url == f"{API}/resolver?project=taigo-test&us=3"


def test_resolve_wiki_page(transport, mocked):
    mocked.add(responses.GET, f"{API}/resolver", json={"project": 2, "wikipage": 6})
    params = ResolverQueryParams(project="taigo-test", wiki_page="home")
    result = ResolverService(transport).resolve_wiki_page(params)
    assert result.wiki_page == 6
    assert mocked.calls[0].request.url == f"{API}/resolver?project=taigo-test&wikipage=home"


def test_resolve_multiple_objects_sends_all(transport, mocked):
    mocked.add(responses.GET, f"{API}/resolver", json={"project": 2, "issue": 5, "us": 7})
    params = ResolverQueryParams(project="taigo-test", issue=1, user_story=2)
    result = ResolverService(transport).resolve_multiple_objects(params)
    assert (result.issue, result.user_story) == (5, 7)
    assert mocked.calls[0].request.url == f"{API}/resolver?issue=1&project=taigo-test&us=2"


def test_list_webhooks_with_default_project(transport, mocked):
    mocked.add(responses.GET, f"{API}/webhooks", json=[{"id": 1, "name": "hook"}])
    hooks = WebhookService(transport, default_project_id=3).list_webhooks()
    assert [h.name for h in hooks] == ["hook"]
    assert mocked.calls[0].request.url == f"{API}/webhooks?project=3"


def test_list_webhooks_params_take_precedence(transport, mocked):
    mocked.add(responses.GET, f"{API}/webhooks", json=[])
    service = WebhookService(transport, default_project_id=3)
    assert service.list_webhooks(WebhookQueryParameters(project_id=2)) == []
    assert mocked.calls[0].request.url == f"{API}/webhooks?project=2"


def test_list_webhooks_without_filter(transport, mocked):
    mocked.add(responses.GET, f"{API}/webhooks", json=[{"id": 9}])
    hooks = WebhookService(transport).list_webhooks()
    assert hooks == [Webhook(id=9)]
    assert mocked.calls[0].request.url == f"{API}/webhooks"


def test_create_webhook_sends_non_empty_fields(transport, mocked):
    mocked.add(responses.POST, f"{API}/webhooks", json={"id": 4, "name": "hook"})
    hook = Webhook(name="hook", project=2, url="http://localhost/hook", key="secret")
    created = WebhookService(transport).create_webhook(hook)
    assert created.id == 4
    body = json.loads(mocked.calls[0].request.body)
    assert body == {
        "name": "hook",
        "project": 2,
        "url": "http://localhost/hook",
        "key": "secret",
    }


def test_get_and_edit_webhook(transport, mocked):
    mocked.add(responses.GET, f"{API}/webhooks/4", json={"id": 4, "name": "hook"})
    mocked.add(responses.PATCH, f"{API}/webhooks/4", json={"id": 4, "name": "renamed"})
    service = WebhookService(transport)
    fetched = service.get_webhook(Webhook(id=4))
    fetched.name = "renamed"
    edited = service.edit_webhook(fetched)
    assert edited.name == "renamed"
    assert json.loads(mocked.calls[1].request.body) == {"id": 4, "name": "renamed"}


def test_delete_webhook(transport, mocked):
    mocked.add(responses.DELETE, f"{API}/webhooks/4", status=204)
    assert WebhookService(transport).delete_webhook(Webhook(id=4)) is None
    assert mocked.calls[0].request.method == "DELETE"


def test_delete_webhook_error(transport, mocked):
    mocked.add(responses.DELETE, f"{API}/webhooks/4", body="denied", status=403)
    with pytest.raises(TaigaError, match="denied"):
        WebhookService(transport).delete_webhook(Webhook(id=4))


def test_test_webhook_posts_to_webhook_url(transport, mocked):
    mocked.add(responses.POST, f"{API}/webhooks/4", json={"id": 11, "webhook": 4, "status": 200})
    log = WebhookService(transport).test_webhook(Webhook(id=4))
    assert (log.id, log.webhook, log.status) == (11, 4, 200)


def test_list_webhook_logs_drops_project(transport, mocked):
    mocked.add(responses.GET, f"{API}/webhooklogs", json=[{"id": 1}, {"id": 2}])
    params = WebhookQueryParameters(project_id=3, webhook_id=5)
    logs = WebhookService(transport).list_webhook_logs(params)
    assert [log.id for log in logs] == [1, 2]
    assert mocked.calls[0].request.url == f"{API}/webhooklogs?webhook=5"
    assert params.project_id == 3


def test_get_webhook_log(transport, mocked):
    mocked.add(
        responses.GET,
        f"{API}/webhooklogs/7",
        json={"id": 7, "request_headers": {"Content-Type": "application/json"}},
    )
    log = WebhookService(transport).get_webhook_log(Webhook(id=7))
    assert log.id == 7
    assert log.request_headers.content_type == "application/json"


def test_resend_webhook_request(transport, mocked):
    mocked.add(responses.POST, f"{API}/webhooklogs/7/resend", json={"id": 8, "webhook": 4})
    log = WebhookService(transport).resend_webhook_request(WebhookLog(id=7, webhook=4))
    assert (log.id, log.webhook) == (8, 4)
    body = json.loads(mocked.calls[0].request.body)
    assert body["id"] == 7
    assert body["webhook"] == 4