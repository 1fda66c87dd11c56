"""Crossroad — declare, validate, and dispatch incoming app links.

Every link source and route is checked when the router is built, so a
misconfigured route table fails at startup instead of when a URL arrives.

Basic usage::

    from crossroad import CustomURLScheme, UniversalLink, build_router, only_for

    pokedex = CustomURLScheme("pokedex")
    web = UniversalLink("https://my-awesome-pokedex.com")

    def register(routes):
        routes.add("/pokemons", list_pokemons)
        routes.add("/pokemons/:id", show_pokemon, accepting=only_for(pokedex))

    router = build_router([pokedex, web], register)
    router.open_if_possible("pokedex://pokemons/25")
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ANY",
    "AcceptAny",
    "Context",
    "CrossroadError",
    "CustomURLScheme",
    "DuplicateRoute",
    "InvalidLinkSource",
    "InvalidPattern",
    "OnlyFor",
    "Route",
    "RouteRegistry",
    "Router",
    "RouterConfig",
    "UniversalLink",
    "UnknownLinkSource",
    "ValidationError",
    "build_router",
    "only_for",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ANY": "crossroad.policy",
    "AcceptAny": "crossroad.policy",
    "Context": "crossroad.routing.context",
    "CrossroadError": "crossroad.errors",
    "CustomURLScheme": "crossroad.sources",
    "DuplicateRoute": "crossroad.errors",
    "InvalidLinkSource": "crossroad.errors",
    "InvalidPattern": "crossroad.errors",
    "OnlyFor": "crossroad.policy",
    "Route": "crossroad.routing.route",
    "RouteRegistry": "crossroad.routing.router",
    "Router": "crossroad.routing.router",
    "RouterConfig": "crossroad.config",
    "UniversalLink": "crossroad.sources",
    "UnknownLinkSource": "crossroad.errors",
    "ValidationError": "crossroad.errors",
    "build_router": "crossroad.routing.router",
    "only_for": "crossroad.policy",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crossroad`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
