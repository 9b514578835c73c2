"""Collect a class's own and inherited sections, grouped by kind."""

from dataclasses import dataclass, field

from apiref.models import ClassDoc, RootDoc, Section, SectionKind
from apiref.resolve_ancestors import resolve_ancestors

AGGREGATED_KINDS = (
    SectionKind.METHOD,
    SectionKind.FUNCTION,
    SectionKind.EVENT,
    SectionKind.PROPERTY,
    SectionKind.OPTION,
    SectionKind.PANE,
)

INHERITED_KINDS = (
    SectionKind.OPTION,
    SectionKind.EVENT,
    SectionKind.METHOD,
    SectionKind.PROPERTY,
)


@dataclass(frozen=True)
class InheritedGroup:
    """Sections of one kind attributed to an ancestor class."""

    class_doc: ClassDoc
    sections: list[Section]


@dataclass
class ClassSections:
    """A class's own sections and its inherited groups, per kind."""

    own: dict[SectionKind, list[Section]] = field(default_factory=dict)
    inherited: dict[SectionKind, list[InheritedGroup]] = field(default_factory=dict)

    def own_of(self, kind: SectionKind) -> list[Section]:
        """Return the class's own sections of a kind."""
        return self.own.get(kind, [])

    def inherited_of(self, kind: SectionKind) -> list[InheritedGroup]:
        """Return the inherited groups of a kind, in ancestor order."""
        return self.inherited.get(kind, [])


def section_sort_key(section: Section) -> tuple[str, str]:
    """Order sections by name, ignoring case first."""
    return (section.name.casefold(), section.name)


def sorted_sections(class_doc: ClassDoc, kind: SectionKind) -> list[Section]:
    """Return a class's sections of one kind sorted by name."""
    ss = class_doc.supersection(kind)
    if ss is None:
        return []
    return sorted(ss.sections.values(), key=section_sort_key)


def aggregate_sections(class_doc: ClassDoc, root: RootDoc) -> ClassSections:
    """Gather own and inherited sections for a class."""
    result = ClassSections()
    for kind in AGGREGATED_KINDS:
        result.own[kind] = sorted_sections(class_doc, kind)

    ancestors = resolve_ancestors(class_doc.id, root)
    for kind in INHERITED_KINDS:
        groups: list[InheritedGroup] = []
        seen: set[tuple[str, str]] = set()
        for ancestor in ancestors:
            sections = []
            for section in sorted_sections(ancestor, kind):
                key = (ancestor.id, section.name)
                if section.uninheritable or not section.documentables or key in seen:
                    continue
                seen.add(key)
                sections.append(section)
            if sections:
                groups.append(InheritedGroup(class_doc=ancestor, sections=sections))
        result.inherited[kind] = groups
    return result
