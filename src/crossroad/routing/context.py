"""Handler context — what a route handler receives for a matched URL."""

from dataclasses import dataclass, field

from crossroad.routing.params import convert_param
from crossroad.sources import LinkSource


@dataclass(frozen=True, slots=True)
class Context:
    """A matched URL, the link source it arrived from, and its parameters.

    Usage::

        def show_pokemon(context: Context) -> bool:
            pokemon_id = context.parameter("id", int)
            ...
    """

    url: str
    source: LinkSource
    parameters: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)

    def parameter[T](self, name: str, param_type: type[T] = str) -> T:  # type: ignore[assignment]
        """Return path parameter *name* converted to *param_type*.

        Raises ``KeyError`` if the pattern captured no such parameter.
        Raises ``ValueError`` if the value does not convert.
        """
        return convert_param(self.parameters[name], param_type)
