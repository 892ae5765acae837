"""
Разрешение $ref по таблице разыменованных компонентов

Разрешение одношаговое: в разыменованных компонентах ссылок уже нет.
"""

from typing import Any, Mapping, Tuple, Union

from ...errors import (
    CategoryMismatchError,
    InvalidReferenceError,
    ReferenceNotFoundError,
)
from ..types.openapi import (
    Parameter,
    Reference,
    ResolvedComponents,
    ResolvedParameter,
    ResolvedResponse,
    Response,
)


def split_reference(ref: str) -> Tuple[str, str]:
    """`#/components/schemas/Pet` -> `("schemas", "Pet")`"""
    segments = ref.split("/")
    if len(segments) != 4 or segments[0] != "#" or segments[1] != "components":
        raise InvalidReferenceError(ref)

    _, _, category, name = segments
    return category, name


def resolve_reference(ref: str, category: str, components: ResolvedComponents) -> Any:
    """Возвращает конкретный объект, на который указывает ссылка"""
    segments = ref.split("/")
    actual = segments[2] if len(segments) > 2 else None

    if actual != category:
        raise CategoryMismatchError(ref, expected=category, actual=actual)

    if len(segments) != 4:
        raise InvalidReferenceError(ref)

    name = segments[3]
    table = components.table(category)
    if name not in table:
        raise ReferenceNotFoundError(ref, category, name)

    return table[name]


def resolve_parameter(
    parameter: Union[Reference, Parameter], components: ResolvedComponents
) -> Union[Parameter, ResolvedParameter]:
    if isinstance(parameter, Reference):
        return resolve_reference(parameter.ref, "parameters", components)
    return parameter


def resolve_response(
    response: Union[Reference, Response], components: ResolvedComponents
) -> Union[Response, ResolvedResponse]:
    if isinstance(response, Reference):
        return resolve_reference(response.ref, "responses", components)
    return response


def resolve_schema(schema: Any, components: ResolvedComponents) -> Any:
    """Схема в виде модели или "сырого" словаря; ссылка разрешается в словарь"""
    if isinstance(schema, Reference):
        return resolve_reference(schema.ref, "schemas", components)
    if isinstance(schema, Mapping) and "$ref" in schema:
        return resolve_reference(schema["$ref"], "schemas", components)
    return schema
