"""The service for the wiki endpoint."""

from pathlib import Path

from .records import WikiPage
from .transport import Transport


class WikiService:
    """Handles wiki page attachments."""

    def __init__(self, transport: Transport, endpoint: str = "wiki") -> None:
        self.transport = transport
        self.endpoint = endpoint

    def create_attachment(self, file_path: str | Path, wiki_page: WikiPage) -> dict:
        """Upload a file as an attachment of the wiki page."""
        url = self.transport.make_url(self.endpoint, "attachments")
        return self.transport.upload(url, file_path, wiki_page.id, wiki_page.project)