from __future__ import annotations

from dataclasses import dataclass, field
import itertools
import secrets
import string
from typing import Protocol, Union

from .colors import DEFAULT_COLOR, parse_color
from .errors import SvgLayerError


ID_ALPHABET = "_-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


class IdGenerator(Protocol):
    """Source of identifiers for definitions within one document."""

    def next_id(self) -> str:
        ...

    def reset(self) -> None:
        """Forget issued ids; called when the owning document is cleared."""
        ...


class SequentialIdGenerator:
    def __init__(self, prefix: str = "def") -> None:
        if not prefix or not (prefix[0].isalpha() or prefix[0] == "_"):
            raise SvgLayerError("id prefix must start with a letter or `_`")
        self.prefix = prefix
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        return f"{self.prefix}{next(self._counter)}"

    def reset(self) -> None:
        self._counter = itertools.count(1)


class RandomIdGenerator:
    """Short random ids; the first symbol is always a letter so the id is a valid XML name."""

    def __init__(self, size: int = 6) -> None:
        if size < 1:
            raise SvgLayerError("id size must be >= 1")
        self.size = size

    def next_id(self) -> str:
        head = secrets.choice(string.ascii_letters)
        tail = "".join(secrets.choice(ID_ALPHABET) for _ in range(self.size - 1))
        return head + tail

    def reset(self) -> None:
        pass


@dataclass(frozen=True)
class ColorStop:
    offset: str
    color: str
    opacity: str | None = None

    @classmethod
    def parse(cls, raw: "str | ColorStop") -> "ColorStop":
        """Build a stop from `"<offset> <color> [opacity]"`, e.g. `"20% #ccc 0.8"`."""

        if isinstance(raw, ColorStop):
            return raw
        parts = raw.split()
        if len(parts) < 2:
            raise SvgLayerError(f"color stop needs an offset and a color: {raw!r}")
        return cls(offset=parts[0], color=parts[1], opacity=parts[2] if len(parts) > 2 else None)


@dataclass(frozen=True)
class Definition:
    id: str


@dataclass(frozen=True)
class Gradient(Definition):
    stops: tuple[ColorStop, ...] = ()

    def __post_init__(self) -> None:
        if len(self.stops) < 1:
            raise SvgLayerError("gradient must have at least 1 color stop")

    @property
    def url(self) -> str:
        return f"url(#{self.id})"


@dataclass(frozen=True)
class LinearGradient(Gradient):
    angle: float = 0


@dataclass(frozen=True)
class RadialGradient(Gradient):
    pass


@dataclass(frozen=True)
class Filter(Definition):
    @property
    def url(self) -> str:
        return f"url(#{self.id})"


@dataclass(frozen=True)
class BlurFilter(Filter):
    std_deviation: float = 0
    input: str | None = None


@dataclass(frozen=True)
class DropShadowFilter(Filter):
    dx: float = 0
    dy: float = 0
    std_deviation: float = 0
    color: str = DEFAULT_COLOR
    opacity: float = 1.0

    @classmethod
    def from_color(
        cls,
        id: str,
        dx: float,
        dy: float,
        std_deviation: float,
        color: str = DEFAULT_COLOR,
    ) -> "DropShadowFilter":
        """Accept the same `"black 50%"` compound form drawables use."""

        base, opacity = parse_color(color)
        return cls(
            id=id,
            dx=dx,
            dy=dy,
            std_deviation=std_deviation,
            color=base,
            opacity=1.0 if opacity is None else opacity,
        )


Paint = Union[str, Gradient]


def _parse_stops(stops) -> tuple[ColorStop, ...]:
    # Checked before an id is drawn so a rejected gradient leaves the sequence untouched.
    parsed = tuple(ColorStop.parse(stop) for stop in stops)
    if not parsed:
        raise SvgLayerError("gradient must have at least 1 color stop")
    return parsed


@dataclass
class DefinitionRegistry:
    """Ordered gradients and filters of one document."""

    id_generator: IdGenerator = field(default_factory=SequentialIdGenerator)
    entries: list[Definition] = field(default_factory=list)

    def linear_gradient(self, angle: float, stops: tuple["str | ColorStop", ...]) -> LinearGradient:
        parsed = _parse_stops(stops)
        return self._register(LinearGradient(id=self.id_generator.next_id(), stops=parsed, angle=angle))

    def radial_gradient(self, stops: tuple["str | ColorStop", ...]) -> RadialGradient:
        parsed = _parse_stops(stops)
        return self._register(RadialGradient(id=self.id_generator.next_id(), stops=parsed))

    def blur_filter(self, std_deviation: float, input: str | None = None) -> BlurFilter:
        return self._register(BlurFilter(id=self.id_generator.next_id(), std_deviation=std_deviation, input=input))

    def drop_shadow_filter(
        self,
        dx: float,
        dy: float,
        std_deviation: float,
        color: str = DEFAULT_COLOR,
    ) -> DropShadowFilter:
        return self._register(DropShadowFilter.from_color(self.id_generator.next_id(), dx, dy, std_deviation, color))

    def clear(self) -> None:
        self.entries.clear()
        self.id_generator.reset()

    def _register(self, definition):
        self.entries.append(definition)
        return definition
