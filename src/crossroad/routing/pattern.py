"""Pattern parsing — raw pattern strings to structured path templates.

Examples::

    "/"                      -> Pattern(explicit_source=None, segments=())
    "/pokemons/:id"          -> Pattern(explicit_source=None, segments=("pokemons", ":id"))
    "pokedex://pokemons"     -> Pattern(explicit_source=CustomURLScheme("pokedex"), segments=("pokemons",))
    "https://example.com/a"  -> Pattern(explicit_source=UniversalLink("https://example.com"), segments=("a",))

Parsing never looks at the router's declared link sources; whether an
explicit source is acceptable is decided by the validation engine.
"""

from dataclasses import dataclass
from urllib.parse import unquote

from crossroad.config import RouterConfig
from crossroad.errors import InvalidPattern
from crossroad.sources import CustomURLScheme, LinkSource, UniversalLink

_DEFAULT_CONFIG = RouterConfig()

PARAM_PREFIX = ":"


def is_param(segment: str) -> bool:
    return segment.startswith(PARAM_PREFIX)


@dataclass(frozen=True, slots=True)
class Pattern:
    """A parsed path template.

    ``segments`` is empty for the root path.  A segment starting with ``:``
    captures one path component under the name that follows the colon.
    """

    raw: str
    explicit_source: LinkSource | None
    segments: tuple[str, ...]

    @property
    def path(self) -> str:
        return "/" + "/".join(self.segments)

    @property
    def normalized_path(self) -> str:
        """The path with parameter names erased.

        ``/users/:id`` and ``/users/:name`` match the same URLs, so they
        normalize to the same string.
        """
        return "/" + "/".join(PARAM_PREFIX if is_param(s) else s for s in self.segments)

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(s[1:] for s in self.segments if is_param(s))

    def match(self, components: list[str]) -> dict[str, str] | None:
        """Match URL path components against this pattern.

        Returns captured (percent-decoded) parameters, or ``None`` if the
        structure differs.
        """
        if len(components) != len(self.segments):
            return None
        params: dict[str, str] = {}
        for segment, component in zip(self.segments, components, strict=True):
            if is_param(segment):
                params[segment[1:]] = unquote(component)
            elif segment != component:
                return None
        return params


def parse_pattern(raw: str, config: RouterConfig = _DEFAULT_CONFIG) -> Pattern:
    """Parse a pattern string into a ``Pattern``.

    Raises ``InvalidPattern`` for an empty string, a malformed scheme
    prefix, or any empty path segment (``//``, a trailing ``/``, ...).
    A single leading ``/`` is allowed; ``/`` alone is the root path.
    """
    if not raw:
        raise InvalidPattern(raw)

    explicit_source: LinkSource | None = None
    path = raw
    if "://" in raw:
        scheme, _, rest = raw.partition("://")
        if not scheme or "/" in scheme:
            raise InvalidPattern(raw)
        if scheme.lower() in config.web_schemes:
            host = rest.split("/", 1)[0]
            if not host:
                raise InvalidPattern(raw)
            explicit_source = UniversalLink(f"{scheme}://{host}")
            path = rest[len(host):]
        else:
            explicit_source = CustomURLScheme(scheme)
            path = rest

    if path.startswith("/"):
        path = path[1:]
    if not path:
        return Pattern(raw=raw, explicit_source=explicit_source, segments=())

    segments = tuple(path.split("/"))
    for segment in segments:
        if not segment or segment == PARAM_PREFIX:
            raise InvalidPattern(raw)
    return Pattern(raw=raw, explicit_source=explicit_source, segments=segments)
