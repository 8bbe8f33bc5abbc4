"""
Derived view of the link collection.

derive_projection is a pure function of (links, search term, sort key,
sort order); the dashboard recomputes it whenever one of those changes.
"""

from enum import Enum
from typing import Iterable, List, Tuple, Union

from shortlink_client.schemas.link import Link


class SortKey(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    CLICKS = "clicks"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


def matches_search(link: Link, search_term: str) -> bool:
    """Case-insensitive substring match on original URL or short code"""
    if not search_term:
        return True
    term = search_term.lower()
    return term in link.original_url.lower() or term in link.short_code.lower()


def sort_value(link: Link, sort_key: SortKey) -> Union[int, float]:
    if sort_key == SortKey.CLICKS:
        return link.click_count
    if sort_key == SortKey.UPDATED:
        return link.updated_at.timestamp()
    return link.created_at.timestamp()


def _id_order(link: Link) -> Tuple[int, Union[int, str]]:
    # Numeric ids sort numerically and before string ids
    if isinstance(link.id, int):
        return 0, link.id
    return 1, str(link.id)


def derive_projection(
    links: Iterable[Link],
    search_term: str = "",
    sort_key: SortKey = SortKey.CREATED,
    sort_order: SortOrder = SortOrder.DESC
) -> List[Link]:
    """
    Filter then sort.

    Equal sort values are ordered by link id, in the same direction as the
    sort, so the result is deterministic.
    """
    sort_key = SortKey(sort_key)
    sort_order = SortOrder(sort_order)

    visible = [link for link in links if matches_search(link, search_term)]
    return sorted(
        visible,
        key=lambda link: (sort_value(link, sort_key), _id_order(link)),
        reverse=sort_order == SortOrder.DESC,
    )
