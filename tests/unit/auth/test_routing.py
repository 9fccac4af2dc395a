"""Tests for the page access gate."""

import pytest

from portfolio_client.auth.routing import resolve_route
from portfolio_client.auth.storage import SessionCredentialStore


class TestResolveRoute:
    """Test route gating on the stored credential."""

    @pytest.mark.parametrize("path", ["/rulesets", "/advisor/history", "/"])
    def test_unauthenticated_goes_to_login(self, path):
        assert resolve_route(path, SessionCredentialStore()) == "/login"

    def test_unauthenticated_may_open_login(self):
        assert resolve_route("/login", SessionCredentialStore()) is None

    def test_login_with_query_is_still_login(self):
        path = "/login?message=Session%20expired"

        assert resolve_route(path, SessionCredentialStore()) is None

    def test_authenticated_leaves_login(self):
        store = SessionCredentialStore()
        store.write("token")

        assert resolve_route("/login", store) == "/rulesets"

    def test_authenticated_proceeds(self):
        store = SessionCredentialStore()
        store.write("token")

        assert resolve_route("/instruments", store) is None

    def test_custom_paths(self):
        store = SessionCredentialStore()
        store.write("token")

        assert resolve_route("/signin", store, login_path="/signin", home_path="/") == "/"


class TestRouteRedirects:
    """Test static page aliases."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [("/", "/rulesets"), ("/overrides", "/imports-exports")],
    )
    def test_aliases_with_token(self, path, expected):
        store = SessionCredentialStore()
        store.write("token")

        assert resolve_route(path, store) == expected

    @pytest.mark.parametrize("path", ["/", "/overrides"])
    def test_aliases_without_token_go_to_login(self, path):
        assert resolve_route(path, SessionCredentialStore()) == "/login"

    def test_custom_redirect_map(self):
        store = SessionCredentialStore()
        store.write("token")

        assert resolve_route("/old", store, redirects={"/old": "/new"}) == "/new"
        assert resolve_route("/", store, redirects={}) is None
