# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Builds the class graph from triples and emits its declarations.

Graph construction runs in passes so that every subclass-of and superseded-by
reference resolves: all builtins and classes are registered first, then each
class ingests its facts, then properties and enum values are attached. The
registry is frozen before any declaration is computed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from schemadts.model.declarations import Declaration
from schemadts.triples.nodes import Fact, Topic, Triple, UrlNode, group_by_subject
from schemadts.triples.wellknown import (
    SCHEMA_NAMESPACE,
    get_subclass_of,
    get_types,
    is_class,
    is_domain_includes,
    is_property,
    is_type,
)
from schemadts.ts.context import DEFAULT_CONTEXT, Context
from schemadts.ts.entities import BooleanEnum, Builtin, Class, DataTypeUnion
from schemadts.ts.enums import EnumValue
from schemadts.ts.ordering import sort_entities
from schemadts.ts.property import Property
from schemadts.ts.registry import EntityRegistry, UnresolvedReferenceError

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############


@dataclass
class GeneratorOptions:
    """Knobs consumed by graph construction and emission.

    Attributes:
        context: Namespaces used to scope emitted property names.
        skip_deprecated_properties: Leave superseded properties out of base types.
        allow_string_classes: Names of classes whose values may also be bare strings.
    """

    context: Context = field(default_factory=lambda: Context.parse(DEFAULT_CONTEXT))
    skip_deprecated_properties: bool = True
    allow_string_classes: frozenset[str] = frozenset()


def well_known_builtins(namespace: str = SCHEMA_NAMESPACE) -> list[Builtin]:
    """Return the builtin data types rooted at *namespace*, the ``DataType`` union last."""
    text = Builtin(namespace + "Text", "string", "Data type: Text.")
    number = Builtin(namespace + "Number", "number", "Data type: Number.")
    time = Builtin(
        namespace + "Time",
        "string",
        "DateTime represented in string, e.g. 2017-01-04T17:10:00-05:00.",
    )
    date = Builtin(namespace + "Date", "string", "A date value in ISO 8601 date format.")
    date_time = Builtin(
        namespace + "DateTime",
        "string",
        "A combination of date and time of day in the form "
        "[-]CCYY-MM-DDThh:mm:ss[Z|(+|-)hh:mm] (see Chapter 5.4 of ISO 8601).",
    )
    boolean = BooleanEnum(
        namespace + "Boolean",
        namespace + "True",
        namespace + "False",
        "Boolean: True or False.",
    )
    members: list[Builtin] = [text, number, time, date, date_time, boolean]
    data_type = DataTypeUnion(
        namespace + "DataType",
        members,
        "The basic data types such as Integers, Strings, etc.",
    )
    return [*members, data_type]


def build_registry(topics: list[Topic], options: GeneratorOptions | None = None) -> EntityRegistry:
    """Link *topics* into a frozen entity registry.

    Raises:
        GraphError: If a class, property or enum value refers to an entity
            that does not exist in the graph.
    """
    options = options or GeneratorOptions()
    registry = EntityRegistry()
    for builtin in well_known_builtins(_schema_namespace(topics)):
        registry.register(builtin)

    class_topics = [t for t in topics if is_class(t)]
    for topic in class_topics:
        if str(topic.subject) in registry:
            continue
        allow = topic.subject.name in options.allow_string_classes
        registry.register(Class(topic.subject, allow_string_type=allow))

    for topic in class_topics:
        _add_class_facts(topic, registry)
    for topic in topics:
        if is_property(topic):
            _add_property(topic, registry)
    for topic in topics:
        if not is_class(topic) and not is_property(topic) and str(topic.subject) not in registry:
            _add_enum_value(topic, registry)

    registry.freeze()
    return registry


def generate(triples: list[Triple], options: GeneratorOptions | None = None) -> list[Declaration]:
    """Return every declaration of the graph described by *triples*, in emission order."""
    options = options or GeneratorOptions()
    registry = build_registry(group_by_subject(triples), options)
    declarations: list[Declaration] = []
    for entity in sort_entities(registry):
        declarations.extend(
            entity.to_declarations(
                options.context,
                skip_deprecated_properties=options.skip_deprecated_properties,
            )
        )
    return declarations


# ################
# Implementation
# ################


def _schema_namespace(topics: list[Topic]) -> str:
    """Return the Schema.org namespace spelling used by *topics* (http or https)."""
    for topic in topics:
        if topic.subject.matches_context(SCHEMA_NAMESPACE):
            return topic.subject.context
    return SCHEMA_NAMESPACE


def _add_class_facts(topic: Topic, registry: EntityRegistry) -> None:
    entity = registry.get(str(topic.subject))
    assert entity is not None
    for fact in topic.facts:
        if is_type(fact.predicate):
            continue
        # Builtins are leaves of the inheritance lattice.
        if entity.is_builtin and get_subclass_of(fact):
            continue
        if not entity.add(fact, registry):
            _log_unhandled(topic.subject, fact)


def _add_property(topic: Topic, registry: EntityRegistry) -> None:
    prop = Property(topic.subject)
    domains: list[Class] = []
    for fact in topic.facts:
        if is_type(fact.predicate):
            continue
        if is_domain_includes(fact.predicate):
            domain = registry.get(str(fact.object))
            if domain is None:
                raise UnresolvedReferenceError(
                    f"Could not find class {fact.object} in the domain of property {topic.subject.name}"
                )
            domains.append(domain)
            continue
        if not prop.add(fact, registry):
            _log_unhandled(topic.subject, fact)

    if not domains:
        logger.debug("property_without_domain", subject=str(topic.subject))
    for domain in domains:
        domain.add_prop(prop)


def _add_enum_value(topic: Topic, registry: EntityRegistry) -> None:
    enum_classes = [c for c in (registry.get(str(t)) for t in get_types(topic)) if c is not None]
    if not enum_classes:
        logger.debug("unhandled_topic", subject=str(topic.subject))
        return

    value = EnumValue(topic.subject)
    for fact in topic.facts:
        if is_type(fact.predicate):
            continue
        if not value.add(fact):
            _log_unhandled(topic.subject, fact)
    for enum_class in enum_classes:
        enum_class.add_enum(value)


def _log_unhandled(subject: UrlNode, fact: Fact) -> None:
    logger.debug(
        "unhandled_fact",
        subject=str(subject),
        predicate=str(fact.predicate),
        object=str(fact.object),
    )
