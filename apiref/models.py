"""Data models for representing Leafdoc documentation entities."""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_SECTION = "__default"

DefaultValue = str | int | float | bool | None


class SectionKind(Enum):
    """Kinds of supersections a class can carry."""

    OPTION = "option"
    EXAMPLE = "example"
    CONSTRUCTOR = "constructor"
    EVENT = "event"
    METHOD = "method"
    FUNCTION = "function"
    PROPERTY = "property"
    PANE = "pane"


@dataclass(frozen=True)
class Param:
    """A single parameter of a method, function or constructor."""

    name: str
    type: str | None = None


@dataclass(frozen=True)
class Documentable:
    """One concrete documented unit (method overload, option, event, ...)."""

    name: str
    aka: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    params: list[Param] = field(default_factory=list)
    type: str | None = None
    optional: bool = False
    default_value: DefaultValue = None
    id: str | None = None


@dataclass(frozen=True)
class Section:
    """A named group of documentables of the same kind."""

    name: str
    aka: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    uninheritable: bool = False
    type: str = ""
    documentables: dict[str, Documentable] = field(default_factory=dict)
    id: str | None = None

    @property
    def is_default(self) -> bool:
        """Whether this is the anonymous default group."""
        return self.name == DEFAULT_SECTION


@dataclass(frozen=True)
class SuperSection:
    """All sections of one kind for a class."""

    name: str
    aka: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    sections: dict[str, Section] = field(default_factory=dict)
    id: str | None = None


@dataclass(frozen=True)
class ClassDoc:
    """The full documentation record for one class."""

    id: str
    name: str
    aka: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    supersections: dict[SectionKind, SuperSection] = field(default_factory=dict)
    inherits: list[str] = field(default_factory=list)
    relationships: list[object] = field(default_factory=list)
    anchor_id: str | None = None

    def supersection(self, kind: SectionKind) -> SuperSection | None:
        """Return the supersection of the given kind, if the class has one."""
        return self.supersections.get(kind)


# Class id -> ClassDoc, in the parser's output order.
RootDoc = dict[str, ClassDoc]
