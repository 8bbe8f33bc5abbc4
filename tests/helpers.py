from datetime import datetime, timedelta, timezone

from shortlink_client.schemas.link import Link

BASE = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_link(link_id, short_code=None, original_url=None, clicks=0, created_minute=None, updated_minute=None):
    """Build a Link without going through the API"""
    created = BASE + timedelta(minutes=link_id if created_minute is None else created_minute)
    updated = created if updated_minute is None else BASE + timedelta(minutes=updated_minute)
    return Link(
        id=link_id,
        original_url=original_url or f"https://example.com/{link_id}",
        short_code=short_code or f"code{link_id}",
        click_count=clicks,
        created_at=created,
        updated_at=updated,
    )
