"""
Компиляция HTTP операции в метод клиента и типы ее ответов
"""

import logging
from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from ...errors import MissingOperationIdError
from ..types.models import (
    DispatchCall,
    LiteralType,
    Method,
    Parameter,
    PropertySignature,
    TypeAlias,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
)
from ..types.openapi import Operation, Reference, ResolvedComponents
from ..types.openapi import Parameter as ParameterObject
from .components import (
    json_content_schema,
    render_parameter_type,
    render_request_body_type,
    render_response_type,
)
from .json_schema import to_json_schema
from .resolver import resolve_parameter, resolve_response, resolve_schema

logger = logging.getLogger(__name__)

RESPONSES_NAMESPACE = "Responses"

# Порядок бакетов совпадает с порядком аргументов performRequest
PARAMETER_LOCATIONS = ("path", "header", "query")
PARAMETER_NAMES = {
    "path": "pathParams",
    "header": "headerParams",
    "query": "queryParams",
}


class RenderableParameter(BaseModel):
    name: str
    required: bool
    rendered_type: TypeNode


class CompiledOperation(BaseModel):
    method: Method
    response_declarations: List[TypeAlias] = []


class OperationCompiler:
    """Компилятор одной операции: параметры, тело, ответы, метод клиента"""

    def __init__(self, components: ResolvedComponents):
        self.components = components

    def compile(
        self,
        pattern: str,
        http_method: str,
        inherited_parameters: List[Union[Reference, ParameterObject]],
        operation: Operation,
    ) -> CompiledOperation:
        operation_id = operation.operation_id
        if operation_id is None:
            raise MissingOperationIdError(http_method, pattern)

        logger.debug(f"Compiling {http_method.upper()} {pattern} as {operation_id}")

        buckets = self._partition_parameters(
            [*inherited_parameters, *operation.parameters]
        )
        bucket_types = {
            location: self._render_arguments(buckets[location])
            for location in PARAMETER_LOCATIONS
        }
        body_type = (
            render_request_body_type(operation.request_body)
            if operation.request_body is not None
            else None
        )

        response_type = TypeReference(
            namespace=RESPONSES_NAMESPACE, name=f"{operation_id}Response"
        )

        parameters = [
            Parameter(name=PARAMETER_NAMES[location], var_type=type_node)
            for location, type_node in bucket_types.items()
            if type_node is not None
        ]
        if body_type is not None:
            parameters.append(Parameter(name="body", var_type=body_type))

        call = DispatchCall(
            http_method=http_method.upper(),
            path=pattern,
            path_params=self._argument("path", bucket_types),
            header_params=self._argument("header", bucket_types),
            query_params=self._argument("query", bucket_types),
            body="body" if body_type is not None else None,
            response_schemas=self._response_schemas(operation),
            result_type=response_type,
        )

        method = Method(
            name=operation_id,
            parameters=parameters,
            return_type=TypeReference(name="Promise", type_arguments=[response_type]),
            body=call,
            description=self._description(operation),
            deprecated=operation.deprecated,
        )

        return CompiledOperation(
            method=method,
            response_declarations=self._response_declarations(operation_id, operation),
        )

    def _partition_parameters(
        self, parameters: List[Union[Reference, ParameterObject]]
    ) -> Dict[str, List[RenderableParameter]]:
        buckets: Dict[str, List[RenderableParameter]] = {
            location: [] for location in PARAMETER_LOCATIONS
        }

        for parameter in parameters:
            resolved = resolve_parameter(parameter, self.components)
            if resolved.in_ not in buckets:
                logger.warning(
                    f"Parameter {resolved.name!r} in {resolved.in_} is not supported, skipping"
                )
                continue

            buckets[resolved.in_].append(
                RenderableParameter(
                    name=resolved.name,
                    required=resolved.required,
                    rendered_type=render_parameter_type(parameter),
                )
            )

        return buckets

    @staticmethod
    def _render_arguments(params: List[RenderableParameter]) -> Optional[TypeLiteral]:
        if not params:
            return None

        return TypeLiteral(
            members=[
                PropertySignature(
                    name=param.name,
                    type=param.rendered_type,
                    optional=not param.required,
                )
                for param in params
            ]
        )

    @staticmethod
    def _argument(location: str, bucket_types: Dict[str, Optional[TypeLiteral]]) -> Optional[str]:
        return PARAMETER_NAMES[location] if bucket_types[location] is not None else None

    def _response_schemas(self, operation: Operation) -> Dict[str, dict]:
        """Таблица JSON Schema по кодам ответа; ответы без схемы не попадают в нее"""
        schemas = {}

        for status, response in operation.responses.items():
            resolved = resolve_response(response, self.components)
            schema = json_content_schema(resolved.content)
            if schema is None:
                continue

            schemas[status] = to_json_schema(
                resolve_schema(schema, self.components), self.components
            )

        return schemas

    @staticmethod
    def _response_declarations(operation_id: str, operation: Operation) -> List[TypeAlias]:
        variants = [
            TypeAlias(
                name=f"{operation_id}{status}",
                type=TypeLiteral(
                    members=[
                        PropertySignature(name="kind", type=LiteralType(value=status)),
                        PropertySignature(
                            name="value", type=render_response_type(response)
                        ),
                    ]
                ),
            )
            for status, response in operation.responses.items()
        ]

        aggregate = TypeAlias(
            name=f"{operation_id}Response",
            type=UnionType(
                members=[TypeReference(name=variant.name) for variant in variants]
            ),
        )

        return [aggregate, *variants]

    @staticmethod
    def _description(operation: Operation) -> Optional[str]:
        parts = [part for part in (operation.summary, operation.description) if part]
        return "\n\n".join(part.strip() for part in parts) or None
