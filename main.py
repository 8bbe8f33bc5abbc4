#!/usr/bin/env python3
"""
Command-line interface for the shortlink client.

Usage:
    python main.py register <email> <password>
    python main.py login <email> <password>
    python main.py logout
    python main.py whoami
    python main.py list [--search TERM] [--sort created|updated|clicks] [--order asc|desc]
    python main.py create <url> [--custom-code CODE]
    python main.py update <id> [--url URL] [--code CODE]
    python main.py delete <id> [--yes]
    python main.py stats <id>
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from shortlink_client.config import settings
from shortlink_client.dashboard import DashboardController, SortKey, SortOrder
from shortlink_client.dependencies import (
    get_api_client,
    get_auth_service,
    get_link_service,
    get_navigator,
    get_session_manager,
)
from shortlink_client.errors import APIError
from shortlink_client.schemas.link import Link


def _parse_id(value: str):
    return int(value) if value.isdigit() else value


def _emit(data: Dict[str, Any], error: bool = False) -> int:
    print(json.dumps(data, indent=2, default=str), file=sys.stderr if error else sys.stdout)
    return 1 if error else 0


def _fail(message: str) -> int:
    return _emit({"success": False, "error": message}, error=True)


class ShortlinkCLI:
    """Command-line front end over the services and dashboard state."""

    def __init__(self):
        self.client = get_api_client()
        self.auth = get_auth_service(self.client)
        self.links = get_link_service(self.client)

    async def close(self):
        await self.client.aclose()

    def _link_json(self, link: Link) -> Dict[str, Any]:
        data = link.model_dump(mode="json", by_alias=True)
        data["shortUrl"] = self.links.get_short_url(link.short_code)
        return data

    def _require_login(self) -> Optional[int]:
        if not self.auth.is_authenticated():
            get_navigator().navigate(settings.login_path)
            return _fail("Not signed in - run: main.py login <email> <password>")
        return None

    async def register(self, email: str, password: str) -> int:
        get_navigator().current_path = settings.register_path
        try:
            result = await self.auth.register(email, password)
        except APIError as e:
            return _fail(e.message)
        return _emit({"success": True, "user": result.user.model_dump() if result.user else None})

    async def login(self, email: str, password: str) -> int:
        get_navigator().current_path = settings.login_path
        try:
            result = await self.auth.login(email, password)
        except APIError as e:
            return _fail(e.message)
        return _emit({"success": True, "user": result.user.model_dump() if result.user else None})

    def logout(self) -> int:
        self.auth.logout()
        return _emit({"success": True, "message": "Signed out"})

    def whoami(self) -> int:
        user = self.auth.get_current_user()
        return _emit({
            "authenticated": self.auth.is_authenticated(),
            "user": user.model_dump() if user else None,
        })

    async def list_links(self, search: str, sort: str, order: str) -> int:
        failed = self._require_login()
        if failed is not None:
            return failed

        dashboard = DashboardController(self.links, session=get_session_manager())
        try:
            if not await dashboard.load_links():
                return _fail(dashboard.error or "Could not load links")

            dashboard.set_sort(SortKey(sort), SortOrder(order))
            if search:
                dashboard.set_search_term(search)
                dashboard.flush_search()

            items: List[Dict[str, Any]] = [self._link_json(link) for link in dashboard.visible_links]
            return _emit({"success": True, "count": len(items), "links": items})
        finally:
            dashboard.close()

    async def create(self, url: str, custom_code: Optional[str]) -> int:
        failed = self._require_login()
        if failed is not None:
            return failed
        try:
            link = await self.links.create_link(url, custom_code)
        except APIError as e:
            return _fail(e.message)
        return _emit({"success": True, "link": self._link_json(link)})

    async def update(self, link_id, url: Optional[str], code: Optional[str]) -> int:
        failed = self._require_login()
        if failed is not None:
            return failed

        dashboard = DashboardController(self.links)
        try:
            if not await dashboard.load_links():
                return _fail(dashboard.error or "Could not load links")
            link = await dashboard.update_link(link_id, original_url=url, short_code=code)
        except KeyError:
            return _fail(f"Link {link_id} not found")
        except APIError as e:
            return _fail(e.message)
        finally:
            dashboard.close()
        return _emit({"success": True, "link": self._link_json(link)})

    async def delete(self, link_id, assume_yes: bool) -> int:
        failed = self._require_login()
        if failed is not None:
            return failed

        def confirm() -> bool:
            if assume_yes:
                return True
            answer = input("Are you sure you want to delete this link? [y/N] ")
            return answer.strip().lower() in ("y", "yes")

        dashboard = DashboardController(self.links)
        try:
            deleted = await dashboard.delete_link(link_id, confirm=confirm)
            if not deleted:
                return _fail(dashboard.error or "Cancelled")
        finally:
            dashboard.close()
        return _emit({"success": True, "deleted": link_id})

    async def stats(self, link_id) -> int:
        failed = self._require_login()
        if failed is not None:
            return failed
        try:
            stats = await self.links.get_link_stats(link_id)
        except APIError as e:
            return _fail(e.message)
        return _emit({"success": True, "stats": stats.model_dump(by_alias=True)})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{settings.app_name} {settings.app_version}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name in ("register", "login"):
        sub = subparsers.add_parser(name)
        sub.add_argument("email")
        sub.add_argument("password")

    subparsers.add_parser("logout")
    subparsers.add_parser("whoami")

    list_parser = subparsers.add_parser("list")
    list_parser.add_argument("--search", default="")
    list_parser.add_argument("--sort", choices=[k.value for k in SortKey], default=SortKey.CREATED.value)
    list_parser.add_argument("--order", choices=[o.value for o in SortOrder], default=SortOrder.DESC.value)

    create_parser = subparsers.add_parser("create")
    create_parser.add_argument("url")
    create_parser.add_argument("--custom-code", default=None)

    update_parser = subparsers.add_parser("update")
    update_parser.add_argument("id", type=_parse_id)
    update_parser.add_argument("--url", default=None)
    update_parser.add_argument("--code", default=None)

    delete_parser = subparsers.add_parser("delete")
    delete_parser.add_argument("id", type=_parse_id)
    delete_parser.add_argument("--yes", action="store_true")

    stats_parser = subparsers.add_parser("stats")
    stats_parser.add_argument("id", type=_parse_id)

    return parser


async def run(args: argparse.Namespace) -> int:
    cli = ShortlinkCLI()
    try:
        if args.command == "register":
            return await cli.register(args.email, args.password)
        if args.command == "login":
            return await cli.login(args.email, args.password)
        if args.command == "logout":
            return cli.logout()
        if args.command == "whoami":
            return cli.whoami()
        if args.command == "list":
            return await cli.list_links(args.search, args.sort, args.order)
        if args.command == "create":
            return await cli.create(args.url, args.custom_code)
        if args.command == "update":
            return await cli.update(args.id, args.url, args.code)
        if args.command == "delete":
            return await cli.delete(args.id, args.yes)
        if args.command == "stats":
            return await cli.stats(args.id)
        return _fail(f"Unknown command: {args.command}")
    finally:
        await cli.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
