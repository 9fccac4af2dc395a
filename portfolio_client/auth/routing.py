"""Page access gate based on the stored credential."""

from collections.abc import Mapping
from urllib.parse import urlsplit

from portfolio_client.auth.storage.base import CredentialStore


# Static aliases of the page table, applied before the credential check
ROUTE_REDIRECTS: Mapping[str, str] = {
    "/": "/rulesets",
    "/overrides": "/imports-exports",
}


def resolve_route(
    path: str,
    store: CredentialStore,
    *,
    login_path: str = "/login",
    home_path: str = "/rulesets",
    redirects: Mapping[str, str] = ROUTE_REDIRECTS,
) -> str | None:
    """Return where navigation to ``path`` should be redirected.

    Aliases in ``redirects`` are resolved first. Then, without a token every
    page except the login page redirects to login, and with a token the
    login page redirects home. ``None`` means proceed to ``path`` unchanged.
    """
    requested = urlsplit(path).path or "/"
    target = redirects.get(requested, requested)

    has_token = store.has_token()
    if target != login_path and not has_token:
        return login_path
    if target == login_path and has_token:
        return home_path
    if target != requested:
        return target
    return None
