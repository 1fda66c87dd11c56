"""Accept policies — which of the declared link sources a route handles."""

from collections.abc import Iterable
from dataclasses import dataclass

from crossroad.errors import UnknownLinkSource
from crossroad.sources import LinkSource


@dataclass(frozen=True, slots=True)
class AcceptAny:
    """Accept every link source the router declares."""

    def __str__(self) -> str:
        return "any"


@dataclass(frozen=True, slots=True)
class OnlyFor:
    """Accept exactly the given link sources.

    Each source must also be declared by the router, or building the router
    fails with ``UnknownLinkSource``.  An empty set is allowed: the route
    is reachable from nothing and never overlaps another ``OnlyFor``.
    """

    sources: frozenset[LinkSource]

    def __str__(self) -> str:
        rendered = ", ".join(sorted(str(s) for s in self.sources))
        return f"only(for: {{{rendered}}})"


type AcceptPolicy = AcceptAny | OnlyFor

ANY = AcceptAny()


def only_for(*sources: LinkSource) -> OnlyFor:
    """Build an ``OnlyFor`` policy from one or more link sources."""
    return OnlyFor(frozenset(sources))


def resolve_policy(
    policy: AcceptPolicy, declared: Iterable[LinkSource]
) -> frozenset[LinkSource]:
    """Return the effective-source set of *policy* against *declared*.

    Raises ``UnknownLinkSource`` listing every source of an ``OnlyFor``
    policy that is not declared.
    """
    declared = frozenset(declared)
    match policy:
        case AcceptAny():
            return declared
        case OnlyFor(sources=sources):
            missing = sources - declared
            if missing:
                raise UnknownLinkSource(missing)
            return sources
    msg = f"Unsupported accept policy: {policy!r}"
    raise TypeError(msg)
