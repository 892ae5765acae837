"""
Рендеринг разделов components: schemas, parameters, requestBodies, responses

Каждая запись таблицы превращается в одно экспортируемое объявление типа,
порядок объявлений совпадает с порядком в документе.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from ..types.models import TypeAlias, TypeNode
from ..types.openapi import Parameter, Reference, RequestBody, Response
from .type_renderer import ANY, render_type, with_null

JSON_MEDIA_TYPE = "application/json"


def json_media_type(content: Optional[Mapping[str, Any]]) -> Optional[Any]:
    """
    Выбор JSON медиа-типа из content: сначала application/json, затем
    application/json с параметрами или application/*+json.
    """
    if not content:
        return None

    if JSON_MEDIA_TYPE in content:
        return content[JSON_MEDIA_TYPE]

    for media_type, media in content.items():
        base = media_type.split(";")[0].strip()
        if base == JSON_MEDIA_TYPE or (
            base.startswith("application/") and base.endswith("+json")
        ):
            return media

    return None


def json_content_schema(content: Optional[Mapping[str, Any]]) -> Optional[Any]:
    media = json_media_type(content)
    return media.schema_ if media is not None else None


def render_parameter_type(parameter: Union[Reference, Parameter]) -> TypeNode:
    if isinstance(parameter, Reference):
        return render_type(parameter)
    if parameter.schema_ is None:
        return ANY
    return render_type(parameter.schema_)


def render_request_body_type(request_body: Union[Reference, RequestBody]) -> TypeNode:
    if isinstance(request_body, Reference):
        return render_type(request_body)

    schema = json_content_schema(request_body.content)
    type_node = render_type(schema) if schema is not None else ANY
    if request_body.required:
        return type_node
    return with_null(type_node)


def render_response_type(response: Union[Reference, Response]) -> TypeNode:
    if isinstance(response, Reference):
        return render_type(response)

    schema = json_content_schema(response.content)
    return render_type(schema) if schema is not None else ANY


def _render_section(table: Dict[str, Any], render) -> List[TypeAlias]:
    return [TypeAlias(name=name, type=render(value)) for name, value in table.items()]


def render_schemas(schemas: Dict[str, Any]) -> List[TypeAlias]:
    return _render_section(schemas, render_type)


def render_parameters(parameters: Dict[str, Any]) -> List[TypeAlias]:
    return _render_section(parameters, render_parameter_type)


def render_request_bodies(request_bodies: Dict[str, Any]) -> List[TypeAlias]:
    return _render_section(request_bodies, render_request_body_type)


def render_responses(responses: Dict[str, Any]) -> List[TypeAlias]:
    return _render_section(responses, render_response_type)
