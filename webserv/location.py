"""Per-path configuration of a virtual server."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_REDIRECT_CODE = 301


@dataclass
class Location:
    """Configuration for one URL path prefix inside a server block."""

    path: str = ""
    methods: set[str] = field(default_factory=set)
    root: str = ""
    index: str = ""
    autoindex: bool = False
    redirect: str = ""
    return_code: int = 0
    upload_store: str = ""
    cgi_extension: str = ""

    def add_method(self, method: str) -> None:
        """Allow an HTTP method for this location."""
        self.methods.add(method)

    def set_redirect(self, target: str, code: int = DEFAULT_REDIRECT_CODE) -> None:
        """Redirect requests to ``target`` with the given status code."""
        self.redirect = target
        self.return_code = code

    def has_redirect(self) -> bool:
        return bool(self.redirect)

    def is_method_allowed(self, method: str) -> bool:
        return method in self.methods

    def matches_path(self, uri: str) -> bool:
        """Return True if this location's path is a prefix of ``uri``."""
        return uri.startswith(self.path)

    def resolve_absolute_path(self, uri: str) -> str:
        """Map ``uri`` onto the root directory; empty string if it does not match."""
        if not self.matches_path(uri):
            return ""
        return self.root + uri[len(self.path):]

    def is_upload_enabled(self) -> bool:
        return bool(self.upload_store)

    def is_cgi_request(self, uri: str) -> bool:
        """Return True if ``uri`` ends with the configured CGI extension."""
        return bool(self.cgi_extension) and uri.endswith(self.cgi_extension)

    def effective_index_path(self) -> str:
        """Full path of the index file, or an empty string if none is set."""
        return f"{self.root}/{self.index}" if self.index else ""