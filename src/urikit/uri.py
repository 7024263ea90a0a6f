"""urikit.uri
The URI record and its serialization.
"""

import dataclasses

from typing import Any, Self

from .ports import default_port


@dataclasses.dataclass(frozen=True, eq=False)
class URI:
    """A parsed URI. Build one with urikit.parse; every field is optional.

    Two URIs are equal when they serialize to the same string, so
    "http://example.org:80/" == "http://example.org/".
    """

    scheme: str | None = None
    user: str | None = None
    password: str | None = None
    host: str | None = None
    port: int | None = None
    path: str | None = None
    query: str | None = None
    fragment: str | None = None
    opaque: str | None = None

    @classmethod
    def from_string(cls: type[Self], source: str) -> Self:
        """Parse source, raising urikit.BadPortError on failure."""
        from .parse import parse_or_raise

        return parse_or_raise(source)

    def replace(self: Self, **changes: Any) -> Self:
        """Returns a copy of this URI with the given fields set."""
        return dataclasses.replace(self, **changes)

    @property
    def is_absolute(self: Self) -> bool:
        return self.scheme is not None

    @property
    def is_relative(self: Self) -> bool:
        return self.scheme is None

    @property
    def hostname(self: Self) -> str | None:
        """host, without the brackets around an IPv6 literal"""
        if self.host is None:
            return None
        if self.host.startswith("[") and self.host.endswith("]"):
            return self.host[1:-1]
        return self.host

    @property
    def userinfo(self: Self) -> str | None:
        """user:password"""
        if self.user is None:
            return None
        if self.password is not None:
            return f"{self.user}:{self.password}"
        return self.user

    @property
    def authority(self: Self) -> str | None:
        """userinfo@host:port"""
        port: int | None = self._explicit_port()
        if self.host is None and self.user is None and port is None:
            return None
        result: str = ""
        if self.user is not None:
            result += f"{self.userinfo}@"
        if self.host is not None:
            result += self.host
        if port is not None:
            result += f":{port}"
        return result

    @property
    def full_path(self: Self) -> str:
        """path?query"""
        result: str = self.path if self.path is not None else ""
        if self.query is not None:
            result += f"?{self.query}"
        return result

    def _explicit_port(self: Self) -> int | None:
        # Unknown schemes have no default, so even port 0 is kept.
        if self.port is None:
            return None
        default: int = default_port(self.scheme)
        if default != 0 and self.port == default:
            return None
        return self.port

    def to_string(self: Self) -> str:
        result: str = ""
        if self.scheme is not None:
            result += f"{self.scheme}:"
            if self.opaque is None:
                result += "//"
        if self.opaque is not None:
            return result + self.opaque
        result += self.authority or ""
        result += "/"
        if self.path is not None:
            result += self.path
        if self.query is not None:
            result += f"?{self.query}"
        if self.fragment is not None:
            result += f"#{self.fragment}"
        return result

    def __str__(self: Self) -> str:
        return self.to_string()

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, URI):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __hash__(self: Self) -> int:
        return hash(self.to_string())


def to_string(uri: URI) -> str:
    return uri.to_string()


def hostname(uri: URI) -> str | None:
    return uri.hostname


def userinfo(uri: URI) -> str | None:
    return uri.userinfo


def full_path(uri: URI) -> str:
    return uri.full_path


def is_absolute(uri: URI) -> bool:
    return uri.is_absolute


def is_relative(uri: URI) -> bool:
    return uri.is_relative
