"""Read-only schema registry for schema-constrained XML dialects."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Sequence, Tuple

from rmcxml.errors import SchemaError

ROOT = "ROOT"
"""Key of the implicit document root; its children are the allowed top-level elements."""


@dataclass(frozen=True)
class ElementDocumentation:
    """Hover documentation attached to an element."""

    description: str
    details: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)

    def attribute_description(self, attribute: str) -> Optional[str]:
        return self.attributes.get(attribute)


@dataclass(frozen=True)
class SchemaNode:
    """Everything the registry knows about one element."""

    name: str
    children: Tuple[str, ...] = ()
    attributes: Tuple[str, ...] = ()
    required: Tuple[str, ...] = ()
    documentation: Optional[ElementDocumentation] = None

    def is_required(self, attribute: str) -> bool:
        return attribute in self.required


def _ordered_unique(values: Iterable[str]) -> Tuple[str, ...]:
    seen: Dict[str, None] = {}
    for value in values:
        seen.setdefault(value, None)
    return tuple(seen)


class SchemaRegistry:
    """Immutable lookup tables built once and shared across documents.

    All sequences keep declaration order; completion relies on it to
    present suggestions the way authors conventionally write them.
    """

    def __init__(
        self,
        *,
        hierarchy: Mapping[str, Sequence[str]],
        attributes: Mapping[str, Sequence[str]],
        required: Mapping[str, Sequence[str]],
        enums: Mapping[str, Sequence[str]],
        known_elements: Optional[Iterable[str]] = None,
        pattern_attributes: Iterable[str] = (),
        boolean_attributes: Iterable[str] = (),
        documentation: Optional[Mapping[str, ElementDocumentation]] = None,
        root_element: Optional[str] = None,
    ) -> None:
        self._hierarchy = MappingProxyType({k: _ordered_unique(v) for k, v in hierarchy.items()})
        self._attributes = MappingProxyType({k: _ordered_unique(v) for k, v in attributes.items()})
        self._required = MappingProxyType({k: _ordered_unique(v) for k, v in required.items()})
        self._enums = MappingProxyType({k: _ordered_unique(v) for k, v in enums.items()})
        self._pattern_attributes: FrozenSet[str] = frozenset(pattern_attributes)
        self._boolean_attributes: FrozenSet[str] = frozenset(boolean_attributes)
        self._documentation = MappingProxyType(dict(documentation or {}))

        if known_elements is None:
            names = [name for name in self._hierarchy if name != ROOT]
            for children in self._hierarchy.values():
                names.extend(children)
            names.extend(self._attributes)
            known_elements = names
        self._known: FrozenSet[str] = frozenset(known_elements)

        top_level = self._hierarchy.get(ROOT, ())
        if root_element is None:
            if not top_level:
                raise SchemaError("Schema declares no top-level element under ROOT")
            root_element = top_level[0]
        self._root_element = root_element

        self._check_required_subset()
        self._nodes = MappingProxyType({name: self._build_node(name) for name in sorted(self._known)})

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    @property
    def root_element(self) -> str:
        return self._root_element

    @property
    def known_elements(self) -> FrozenSet[str]:
        return self._known

    def children_of(self, element: str) -> Tuple[str, ...]:
        return self._hierarchy.get(element, ())

    def attributes_of(self, element: str) -> Tuple[str, ...]:
        return self._attributes.get(element, ())

    def required_attributes_of(self, element: str) -> Tuple[str, ...]:
        return self._required.get(element, ())

    def enum_domain_of(self, attribute: str) -> Optional[Tuple[str, ...]]:
        return self._enums.get(attribute)

    def is_known_element(self, name: str) -> bool:
        return name in self._known

    def is_pattern_attribute(self, attribute: str) -> bool:
        return attribute in self._pattern_attributes

    def is_boolean_attribute(self, attribute: str) -> bool:
        return attribute in self._boolean_attributes

    def documentation_for(self, element: str) -> Optional[ElementDocumentation]:
        return self._documentation.get(element)

    def node(self, element: str) -> Optional[SchemaNode]:
        return self._nodes.get(element)

    def elements_with_required_attributes(self) -> Tuple[str, ...]:
        return tuple(name for name, attrs in self._required.items() if attrs)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _check_required_subset(self) -> None:
        for element, required in self._required.items():
            declared = set(self._attributes.get(element, ()))
            missing = [attr for attr in required if attr not in declared]
            if missing:
                raise SchemaError(
                    f"Required attributes {', '.join(missing)} of {element} are not declared attributes",
                    hint="Add them to the element's attribute list",
                )

    def _build_node(self, name: str) -> SchemaNode:
        return SchemaNode(
            name=name,
            children=self.children_of(name),
            attributes=self.attributes_of(name),
            required=self.required_attributes_of(name),
            documentation=self.documentation_for(name),
        )


__all__ = ["ROOT", "ElementDocumentation", "SchemaNode", "SchemaRegistry"]
