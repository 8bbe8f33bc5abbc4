"""REST endpoints consumed by the client."""

LOGIN = "/auth/login"
REGISTER = "/auth/register"

LINKS = "/links"


def link_by_id(link_id) -> str:
    return f"/links/{link_id}"


def link_stats(link_id) -> str:
    return f"/links/{link_id}/stats"
