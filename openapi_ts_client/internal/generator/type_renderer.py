"""
Перевод узлов схем OpenAPI в описания TypeScript типов

Рендеринг рекурсивный и не ходит по ссылкам: $ref всегда превращается в имя
типа, поэтому рекурсивные модели не зацикливают генератор.
"""

import json
from typing import Any

from ..types.models import (
    ArrayType,
    IntersectionType,
    KeywordType,
    LiteralType,
    PropertySignature,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
)
from ..types.openapi import OAObject, Reference, SchemaObject
from ..utils.naming import capitalize
from .resolver import split_reference

ANY = KeywordType(name="any")
NULL = KeywordType(name="null")

KEYWORD_TYPES = {
    "any": ANY,
    "number": KeywordType(name="number"),
    "integer": KeywordType(name="number"),
    "object": KeywordType(name="object"),
    "string": KeywordType(name="string"),
    "boolean": KeywordType(name="boolean"),
    "undefined": KeywordType(name="undefined"),
    "null": NULL,
}


def get_ref_name(ref: str) -> TypeReference:
    """`#/components/requestBodies/NewPet` -> `RequestBodies.NewPet`"""
    category, name = split_reference(ref)
    return TypeReference(namespace=capitalize(category), name=name)


def stringify(value: Any) -> str:
    """Строковое представление значения enum (как у JSON скаляров)"""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def is_nullable(node: OAObject) -> bool:
    return isinstance(node, SchemaObject) and node.nullable is True


def with_null(type_node: TypeNode) -> UnionType:
    """Объединение с `null`, ветка `null` в результате всегда ровно одна"""
    if isinstance(type_node, UnionType):
        if NULL in type_node.members:
            return type_node
        return UnionType(members=[*type_node.members, NULL])
    if type_node == NULL:
        return UnionType(members=[NULL])
    return UnionType(members=[type_node, NULL])


def render_type(node: OAObject) -> TypeNode:
    type_node = _render_shape(node)
    return with_null(type_node) if is_nullable(node) else type_node


def _render_shape(node: OAObject) -> TypeNode:
    if isinstance(node, Reference):
        return get_ref_name(node.ref)

    if node.enum is not None:
        # null в enum - это ветка nullable, а не строка "null"
        return UnionType(
            members=[
                LiteralType(value=stringify(value))
                for value in node.enum
                if value is not None
            ]
        )

    if node.type == "array":
        element = render_type(node.items) if node.items is not None else ANY
        return ArrayType(element=element)

    if node.type == "object":
        if node.properties is not None:
            return _render_record(node)
        if node.one_of is not None:
            return UnionType(members=[render_type(member) for member in node.one_of])
        if node.all_of is not None:
            return IntersectionType(
                members=[render_type(member) for member in node.all_of]
            )
        if node.any_of is not None:
            return UnionType(members=[render_type(member) for member in node.any_of])
        return ANY

    if isinstance(node.type, list):
        return UnionType(
            members=[KEYWORD_TYPES.get(name, ANY) for name in node.type]
        )

    if node.type is not None:
        return KEYWORD_TYPES.get(node.type, ANY)

    return ANY


def _render_record(node: SchemaObject) -> TypeLiteral:
    required = node.required or []
    return TypeLiteral(
        members=[
            PropertySignature(
                name=name,
                type=render_type(value),
                optional=name not in required,
            )
            for name, value in node.properties.items()
        ]
    )
