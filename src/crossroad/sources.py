"""Link sources — the origins an incoming URL can arrive from.

A router declares the link sources it accepts up front::

    from crossroad.sources import CustomURLScheme, UniversalLink

    accepting = [
        CustomURLScheme("pokedex"),                     # pokedex://...
        UniversalLink("https://my-awesome-pokedex.com"),  # https://my-awesome-pokedex.com/...
    ]

Each source validates itself once, when the router is built.  Equality is
by scheme for custom schemes and by scheme + host for universal links, so
``UniversalLink("https://example.com/")`` and
``UniversalLink("https://EXAMPLE.com")`` are the same source.
"""

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from crossroad.config import RouterConfig
from crossroad.errors import InvalidLinkSource

_DEFAULT_CONFIG = RouterConfig()


@dataclass(frozen=True, slots=True)
class CustomURLScheme:
    """An app-specific, non-web URI scheme such as ``pokedex``."""

    scheme: str

    def __str__(self) -> str:
        return f"{self.scheme}://"

    def validate(self, config: RouterConfig = _DEFAULT_CONFIG) -> None:
        """Raise ``InvalidLinkSource`` unless the scheme can be registered by an app."""
        if not self.scheme or "/" in self.scheme:
            raise InvalidLinkSource(self.scheme, "contains invalid characters")
        if self.scheme.lower() in config.well_known_schemes:
            raise InvalidLinkSource(self.scheme, "should not be well known")


@dataclass(frozen=True, slots=True)
class UniversalLink:
    """A web origin (scheme + host) whose URLs are routed to the app.

    ``url`` keeps the string as declared, for diagnostics.  ``scheme`` and
    ``host`` are derived from it and carry the identity of the source.
    """

    url: str = field(compare=False)
    scheme: str = field(init=False)
    host: str = field(init=False)
    path: str = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        scheme = host = path = ""
        try:
            parts = urlsplit(self.url)
        except ValueError:
            # Unparseable (e.g. an unclosed IPv6 bracket); validate() rejects it
            pass
        else:
            scheme = parts.scheme.lower()
            host = parts.netloc.rpartition("@")[2].lower()
            path = parts.path
        # Frozen dataclass: derived fields are set once, here.
        object.__setattr__(self, "scheme", scheme)
        object.__setattr__(self, "host", host)
        object.__setattr__(self, "path", path)

    def __str__(self) -> str:
        if self.scheme and self.host:
            return f"{self.scheme}://{self.host}"
        return self.url

    @property
    def is_absolute(self) -> bool:
        return bool(self.scheme and self.host)

    def validate(self, config: RouterConfig = _DEFAULT_CONFIG) -> None:
        """Raise ``InvalidLinkSource`` unless the URL is a bare web origin.

        A single trailing ``/`` is accepted and treated as no path.
        """
        if not self.is_absolute or self.scheme in config.local_schemes:
            raise InvalidLinkSource(self.url, "must be absolute URL")
        if self.path not in ("", "/"):
            raise InvalidLinkSource(self.url, "should not contain any pathes")


type LinkSource = CustomURLScheme | UniversalLink


def source_for_url(
    scheme: str, host: str, config: RouterConfig = _DEFAULT_CONFIG
) -> LinkSource:
    """Return the link source a URL with *scheme* and *host* arrives from.

    Web schemes arrive from their origin; any other scheme is a custom scheme
    and its host is not part of the source.
    """
    scheme = scheme.lower()
    if scheme in config.web_schemes:
        return UniversalLink(f"{scheme}://{host}")
    return CustomURLScheme(scheme)
