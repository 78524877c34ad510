"""Upload providers that send note content to a remote notes service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

import httpx

from .config import QuicknoteConfig

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"
# Notion rejects rich-text items longer than MAX_TEXT_CHARS and requests
# carrying more than MAX_BLOCKS children.
MAX_TEXT_CHARS = 2000
MAX_BLOCKS = 100
SEPARATOR = "-" * 40

EchoFunc = Callable[[str], None]


class UploadError(RuntimeError):
    """Raised when uploading a note fails."""


@dataclass(slots=True, frozen=True)
class UploadResult:
    """Outcome of a successful upload."""

    page_id: str | None = None
    url: str | None = None
    simulated: bool = False


class NoteUploader(ABC):
    """Common interface for upload providers."""

    @abstractmethod
    def upload(self, content: str, *, title: str | None = None) -> UploadResult:
        """Send ``content`` to the remote service."""


class SimulatedUploader(NoteUploader):
    """Uploader that only prints the content it would send."""

    def __init__(self, echo: EchoFunc) -> None:
        self.echo = echo

    def upload(self, content: str, *, title: str | None = None) -> UploadResult:
        self.echo("Simulating Notion upload with content:")
        self.echo(SEPARATOR)
        self.echo(content)
        self.echo(SEPARATOR)
        return UploadResult(simulated=True)


class NotionUploader(NoteUploader):
    """Create a page in a Notion database for each uploaded note."""

    def __init__(
        self,
        token: str,
        database_id: str,
        *,
        title_property: str = "Title",
        client: httpx.Client | None = None,
    ) -> None:
        self.token = token
        self.database_id = database_id
        self.title_property = title_property
        self._client = client

    def upload(self, content: str, *, title: str | None = None) -> UploadResult:
        if not self.token:
            raise UploadError("NOTION_TOKEN is not set.")
        if not self.database_id:
            raise UploadError("NOTION_DATABASE_ID is not set.")

        if self._client is not None:
            return self._create_page(self._client, content, title)
        with httpx.Client(timeout=30.0) as client:
            return self._create_page(client, content, title)

    def build_payload(
        self, content: str, *, title: str | None = None
    ) -> dict[str, Any]:
        """Return the JSON body for the page creation request.

        Only the first ``MAX_BLOCKS`` paragraphs are included; ``upload``
        appends the rest afterwards.
        """

        return {
            "parent": {"database_id": self.database_id},
            "properties": {
                self.title_property: {
                    "title": [{"type": "text", "text": {"content": title or "Note"}}]
                }
            },
            "children": _paragraph_blocks(content)[:MAX_BLOCKS],
        }

    def _create_page(
        self, client: httpx.Client, content: str, title: str | None
    ) -> UploadResult:
        page = self._send(
            client, "POST", "/pages", self.build_payload(content, title=title)
        )
        page_id = page.get("id")

        remaining = _paragraph_blocks(content)[MAX_BLOCKS:]
        if remaining and not isinstance(page_id, str):
            raise UploadError("Notion response did not include a page id.")
        for start in range(0, len(remaining), MAX_BLOCKS):
            self._send(
                client,
                "PATCH",
                f"/blocks/{page_id}/children",
                {"children": remaining[start : start + MAX_BLOCKS]},
            )

        return UploadResult(page_id=page_id, url=page.get("url"))

    def _send(
        self, client: httpx.Client, method: str, path: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Notion-Version": NOTION_VERSION,
        }
        try:
            response = client.request(
                method, f"{NOTION_API_URL}{path}", headers=headers, json=payload
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise UploadError(
                f"Notion API returned {exc.response.status_code}: "
                f"{_error_message(exc.response)}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UploadError(f"Could not reach Notion: {exc}") from exc
        except UnicodeEncodeError as exc:
            raise UploadError(f"Could not encode the Notion request: {exc}") from exc
        except ValueError as exc:
            raise UploadError(f"Invalid Notion request or response: {exc}") from exc

        if not isinstance(data, dict):
            raise UploadError("Notion returned an unexpected response body.")
        return data


def _paragraph_blocks(content: str) -> list[dict[str, Any]]:
    blocks: list[dict[str, Any]] = []
    for paragraph in content.strip().split("\n\n"):
        text = paragraph.strip()
        if not text:
            continue
        chunks = [
            text[start : start + MAX_TEXT_CHARS]
            for start in range(0, len(text), MAX_TEXT_CHARS)
        ]
        blocks.append(
            {
                "object": "block",
                "type": "paragraph",
                "paragraph": {
                    "rich_text": [
                        {"type": "text", "text": {"content": chunk}} for chunk in chunks
                    ]
                },
            }
        )
    return blocks


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return response.text.strip()


def build_uploader(
    config: QuicknoteConfig, *, echo: EchoFunc, dry_run: bool = False
) -> NoteUploader:
    """Return the uploader matching ``config``."""

    if dry_run:
        return SimulatedUploader(echo)
    return NotionUploader(
        config.notion_token,
        config.notion_database_id,
        title_property=config.notion_title_property,
    )
