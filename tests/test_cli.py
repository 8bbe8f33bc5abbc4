import json

import pytest

import main
from shortlink_client import dependencies
from shortlink_client.storage.factory import SessionStorageFactory
from shortlink_client.storage.strategies import InMemorySessionStorage


@pytest.fixture
def memory_session():
    """Point the CLI's shared session at a throwaway in-memory store"""
    SessionStorageFactory._instance = InMemorySessionStorage()
    dependencies.get_session_storage.cache_clear()
    dependencies.get_session_manager.cache_clear()
    dependencies.get_navigator.cache_clear()
    yield dependencies.get_session_manager()
    dependencies.get_session_storage.cache_clear()
    dependencies.get_session_manager.cache_clear()
    dependencies.get_navigator.cache_clear()


class TestParser:
    def test_list_defaults(self):
        args = main.build_parser().parse_args(["list"])

        assert args.sort == "created"
        assert args.order == "desc"
        assert args.search == ""

    def test_numeric_ids_parsed(self):
        assert main.build_parser().parse_args(["delete", "12"]).id == 12
        assert main.build_parser().parse_args(["stats", "abc"]).id == "abc"

    def test_rejects_unknown_sort(self):
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(["list", "--sort", "name"])


class TestCommands:
    def test_whoami_signed_out(self, memory_session, capsys):
        assert main.main(["whoami"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output == {"authenticated": False, "user": None}

    def test_list_requires_login(self, memory_session, capsys):
        assert main.main(["list"]) == 1

        assert "Not signed in" in capsys.readouterr().err

    def test_logout(self, memory_session, capsys):
        memory_session.save("abc", None)

        assert main.main(["logout"]) == 0
        assert memory_session.has_token() is False

    def test_shared_navigator_follows_sign_in(self, memory_session):
        navigator = dependencies.get_navigator()
        navigator.current_path = "/login"

        memory_session.save("abc", None)

        assert navigator.current_path == "/dashboard"
