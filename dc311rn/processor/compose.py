"""Reply composition."""

from __future__ import annotations

from collections.abc import Sequence

from dc311rn.lookup import ServiceRequestRecord
from dc311rn.model import Post, ReplyDraft

from .config import ReplyConfig


class ReplyComposer:
    """Turns resolved service requests into reply drafts."""

    def __init__(self, config: ReplyConfig | None = None) -> None:
        self.config = config or ReplyConfig()

    def link(self, record: ServiceRequestRecord) -> str:
        return f"{self.config.status_base_url}{record.service_request_id} ({record.service_name})"

    def text(self, records: Sequence[ServiceRequestRecord]) -> str:
        label = "Statuses" if len(records) > 1 else "Status"
        links = ", ".join(self.link(r) for r in records)
        return f"{label}: {links} {self.config.suffix}".rstrip()

    def compose(self, post: Post, records: Sequence[ServiceRequestRecord]) -> ReplyDraft:
        """Compose a reply to ``post``.

        The pin is placed at the first record's location. Without records the
        draft is empty and not postable.
        """
        if not records:
            return ReplyDraft(in_reply_to_id=post.id, text="")

        first = records[0].location
        return ReplyDraft(
            in_reply_to_id=post.id,
            text=self.text(records),
            latitude=first.latitude,
            longitude=first.longitude,
            excluded_mention_ids=tuple(self.config.excluded_mention_ids),
        )
