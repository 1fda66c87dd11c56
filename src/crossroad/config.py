"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, passed to
``build_router()`` once and shared by every check it runs.
"""

from dataclasses import dataclass

# Schemes that belong to the web or to the operating system.  A custom URL
# scheme registered under one of these names would never be routed to the app.
WELL_KNOWN_SCHEMES: frozenset[str] = frozenset({
    "about",
    "data",
    "file",
    "ftp",
    "http",
    "https",
    "javascript",
    "mailto",
    "sms",
    "tel",
    "ws",
    "wss",
})

# Schemes whose URLs carry an origin (scheme + host) rather than a bare path
WEB_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# Schemes that can never be a universal link origin
LOCAL_SCHEMES: frozenset[str] = frozenset({"file"})


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(well_known_schemes=WELL_KNOWN_SCHEMES | {"myapp-legacy"})
    """

    # Link source validation
    well_known_schemes: frozenset[str] = WELL_KNOWN_SCHEMES
    local_schemes: frozenset[str] = LOCAL_SCHEMES

    # Pattern parsing and dispatch
    web_schemes: frozenset[str] = WEB_SCHEMES
