"""Framework services the builders depend on.

URL generation and CSRF tokens belong to the host application. The builders
receive them as plain callables so any framework can be plugged in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional
from urllib.parse import urlencode, urljoin

UrlResolver = Callable[[str, Optional[bool]], str]
NamedResolver = Callable[[str, Mapping[str, object]], str]
TokenProvider = Callable[[], str]


def _unconfigured(name: str):
    def missing(*args, **kwargs):
        raise LookupError(f"no {name} collaborator configured")

    return missing


@dataclass(frozen=True)
class Collaborators:
    resolve_url: UrlResolver = _unconfigured("resolve_url")
    resolve_route: NamedResolver = _unconfigured("resolve_route")
    resolve_action: NamedResolver = _unconfigured("resolve_action")
    resolve_asset: UrlResolver = _unconfigured("resolve_asset")
    current_csrf_token: TokenProvider = _unconfigured("current_csrf_token")

    @classmethod
    def static(
        cls,
        base_url: str = "",
        *,
        secure_base_url: str | None = None,
        asset_base_url: str | None = None,
        routes: Mapping[str, str] | None = None,
        actions: Mapping[str, str] | None = None,
        token: str = "",
    ) -> "Collaborators":
        """Collaborators backed by fixed base URLs and lookup tables.

        Route and action tables map names to paths that may contain
        ``{param}`` placeholders; parameters not consumed by the path are
        appended as a query string.
        """

        route_table = dict(routes or {})
        action_table = dict(actions or {})

        def join(base: str, path: str) -> str:
            if "://" in path or path.startswith("//"):
                return path
            if not base:
                return "/" + path.lstrip("/")
            return urljoin(base.rstrip("/") + "/", path.lstrip("/"))

        def url(path: str, secure: bool | None = None) -> str:
            base = secure_base_url if secure and secure_base_url else base_url
            return join(base, path)

        def asset(path: str, secure: bool | None = None) -> str:
            if asset_base_url is not None:
                return join(asset_base_url, path)
            return url(path, secure)

        def named(table: Mapping[str, str], kind: str) -> NamedResolver:
            def resolve(name: str, params: Mapping[str, object]) -> str:
                try:
                    pattern = table[name]
                except KeyError:
                    raise LookupError(f"unknown {kind}: {name}") from None
                remaining = dict(params or {})
                path = pattern
                for key in list(remaining):
                    placeholder = "{" + key + "}"
                    if placeholder in path:
                        path = path.replace(placeholder, str(remaining.pop(key)))
                resolved = url(path)
                if remaining:
                    resolved += "?" + urlencode(remaining)
                return resolved

            return resolve

        return cls(
            resolve_url=url,
            resolve_route=named(route_table, "route"),
            resolve_action=named(action_table, "action"),
            resolve_asset=asset,
            current_csrf_token=lambda: token,
        )


__all__ = ["Collaborators", "NamedResolver", "TokenProvider", "UrlResolver"]
