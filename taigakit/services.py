"""Services for the resolver, stats and webhook endpoints."""

from dataclasses import replace

from .records import (
    DiscoverStats,
    Resolver,
    ResolverQueryParams,
    SystemStats,
    Webhook,
    WebhookLog,
    WebhookQueryParameters,
)
from .transport import Transport, encode_query


class ResolverService:
    """Resolves slugs and refs into object IDs."""

    def __init__(self, transport: Transport, endpoint: str = "resolver") -> None:
        self.transport = transport
        self.endpoint = endpoint

    def _resolve(self, params: ResolverQueryParams) -> Resolver:
        query = encode_query(params.to_query())
        url = self.transport.make_url(f"{self.endpoint}?{query}")
        return Resolver.from_dict(self.transport.get(url))

    def resolve_project(self, params: ResolverQueryParams) -> Resolver:
        """Resolve a project slug."""
        return self._resolve(ResolverQueryParams(project=params.project))

    def resolve_user_story(self, params: ResolverQueryParams) -> Resolver:
        """Resolve a user story ref within a project."""
        return self._resolve(
            ResolverQueryParams(project=params.project, user_story=params.user_story)
        )

    def resolve_issue(self, params: ResolverQueryParams) -> Resolver:
        """Resolve an issue ref within a project."""
        return self._resolve(ResolverQueryParams(project=params.project, issue=params.issue))

    def resolve_task(self, params: ResolverQueryParams) -> Resolver:
        """Resolve a task ref within a project."""
        return self._resolve(ResolverQueryParams(project=params.project, task=params.task))

    def resolve_milestone(self, params: ResolverQueryParams) -> Resolver:
        """Resolve a milestone slug within a project."""
        return self._resolve(
            ResolverQueryParams(project=params.project, milestone=params.milestone)
        )

    def resolve_wiki_page(self, params: ResolverQueryParams) -> Resolver:
        """Resolve a wiki page slug within a project."""
        return self._resolve(
            ResolverQueryParams(project=params.project, wiki_page=params.wiki_page)
        )

    def resolve_multiple_objects(self, params: ResolverQueryParams) -> Resolver:
        """Resolve every parameter that is set in one request."""
        return self._resolve(params)


class StatsService:
    """Reads instance statistics."""

    def __init__(self, transport: Transport, endpoint: str = "stats") -> None:
        self.transport = transport
        self.endpoint = endpoint

    def get_discover_stats(self) -> DiscoverStats:
        """Return the public discover statistics."""
        url = self.transport.make_url(self.endpoint, "discover")
        return DiscoverStats.from_dict(self.transport.get(url))

    def get_system_stats(self) -> SystemStats:
        """Return the system statistics."""
        url = self.transport.make_url(self.endpoint, "system")
        return SystemStats.from_dict(self.transport.get(url))


class WebhookService:
    """Manages webhooks and their delivery logs."""

    def __init__(
        self,
        transport: Transport,
        endpoint: str = "webhooks",
        logs_endpoint: str = "webhooklogs",
        default_project_id: int = 0,
    ) -> None:
        self.transport = transport
        self.endpoint = endpoint
        self.logs_endpoint = logs_endpoint
        self.default_project_id = default_project_id

    def list_webhooks(self, params: WebhookQueryParameters | None = None) -> list[Webhook]:
        """List webhooks, filtered by params or by the default project."""
        url = self.transport.make_url(self.endpoint)
        if params is not None:
            url = f"{url}?{encode_query(params.to_query())}"
        elif self.default_project_id:
            url = f"{url}?project={self.default_project_id}"
        return [Webhook.from_dict(item) for item in self.transport.get(url) or []]

    def create_webhook(self, webhook: Webhook) -> Webhook:
        """Create a webhook and return it as stored."""
        url = self.transport.make_url(self.endpoint)
        return Webhook.from_dict(self.transport.post(url, webhook.to_dict()))

    def get_webhook(self, webhook: Webhook) -> Webhook:
        """Fetch a webhook by its ID."""
        url = self.transport.make_url(self.endpoint, webhook.id)
        return Webhook.from_dict(self.transport.get(url))

    def edit_webhook(self, webhook: Webhook) -> Webhook:
        """Patch a webhook and return the result."""
        url = self.transport.make_url(self.endpoint, webhook.id)
        return Webhook.from_dict(self.transport.patch(url, webhook.to_dict()))

    def delete_webhook(self, webhook: Webhook) -> None:
        """Delete a webhook."""
        self.transport.delete(self.transport.make_url(self.endpoint, webhook.id))

    def test_webhook(self, webhook: Webhook) -> WebhookLog:
        """Send a test request for a webhook and return its log."""
        url = self.transport.make_url(self.endpoint, webhook.id)
        return WebhookLog.from_dict(self.transport.post(url, webhook.to_dict()))

    def list_webhook_logs(
        self, params: WebhookQueryParameters | None = None
    ) -> list[WebhookLog]:
        """List webhook logs; a project filter is not sent."""
        url = self.transport.make_url(self.logs_endpoint)
        if params is not None:
            query = replace(params, project_id=0).to_query()
            url = f"{url}?{encode_query(query)}"
        return [WebhookLog.from_dict(item) for item in self.transport.get(url) or []]

    def get_webhook_log(self, webhook: Webhook) -> WebhookLog:
        """Fetch a webhook log by the given object's ID."""
        url = self.transport.make_url(self.logs_endpoint, webhook.id)
        return WebhookLog.from_dict(self.transport.get(url))

    def resend_webhook_request(self, webhook_log: WebhookLog) -> WebhookLog:
        """Resend the request recorded in a webhook log."""
        url = self.transport.make_url(self.logs_endpoint, webhook_log.id, "resend")
        return WebhookLog.from_dict(self.transport.post(url, webhook_log.to_dict()))