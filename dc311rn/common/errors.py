"""Errors raised across component boundaries."""


class TimelineFetchError(Exception):
    """Raised when a timeline cannot be fetched. Fatal to the run."""

    def __init__(self, timeline: str, detail: str) -> None:
        super().__init__(f"Unable to fetch {timeline} timeline: {detail}")
        self.timeline = timeline
        self.detail = detail


class ReplyPostError(Exception):
    """Raised when a reply cannot be posted. Terminal for that post only."""

    def __init__(self, post_id: str, detail: str) -> None:
        super().__init__(f"Could not post reply to {post_id}: {detail}")
        self.post_id = post_id
        self.detail = detail
