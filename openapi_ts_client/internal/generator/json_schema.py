"""
Преобразование схемы OpenAPI в JSON Schema (draft-04) для проверки ответов

Результат встраивается литералом в сгенерированный вызов performRequest.
Ссылки на components/schemas подставляются из разыменованных компонентов;
схема, которая встречается внутри самой себя, заменяется на `{}`. Ключевые
слова OpenAPI (nullable, readOnly, ...) переводит openapi_schema_to_json_schema.
"""

import logging
from typing import Any, Dict, List, Mapping

from openapi_schema_to_json_schema import InvalidTypeError
from openapi_schema_to_json_schema import to_json_schema as convert_openapi_schema
from pydantic import BaseModel

from ...errors import InvalidDocumentError
from ..types.openapi import ResolvedComponents
from .resolver import resolve_reference

logger = logging.getLogger(__name__)

SCHEMA_LIST_KEYWORDS = ("allOf", "oneOf", "anyOf", "items")
SCHEMA_KEYWORDS = ("not", "additionalProperties", "items")


def to_json_schema(schema: Any, components: ResolvedComponents) -> Dict[str, Any]:
    """Дескриптор проверки для схемы ответа (модель или словарь)"""
    inlined = JsonSchemaConverter(components).convert(schema)
    try:
        return convert_openapi_schema(inlined)
    except InvalidTypeError as exc:
        raise InvalidDocumentError(f"Некорректная схема ответа: {exc}") from exc


class JsonSchemaConverter:
    """Подстановка $ref; результат - дерево без ссылок и циклов"""

    def __init__(self, components: ResolvedComponents):
        self.components = components
        self._stack: List[int] = []

    def convert(self, schema: Any) -> Dict[str, Any]:
        if isinstance(schema, BaseModel):
            schema = schema.model_dump(by_alias=True, exclude_none=True)
        return self._convert(schema)

    def _convert(self, schema: Any) -> Any:
        if not isinstance(schema, Mapping):
            return schema

        if "$ref" in schema:
            schema = resolve_reference(schema["$ref"], "schemas", self.components)
            if not isinstance(schema, Mapping):
                return self.convert(schema)

        if id(schema) in self._stack:
            logger.debug("Recursive schema replaced with an empty schema")
            return {}

        self._stack.append(id(schema))
        try:
            return self._convert_keywords(schema)
        finally:
            self._stack.pop()

    def _convert_keywords(self, schema: Mapping) -> Dict[str, Any]:
        result: Dict[str, Any] = {}

        for key, value in schema.items():
            if key == "properties" and isinstance(value, Mapping):
                result[key] = {
                    name: self._convert(property_schema)
                    for name, property_schema in value.items()
                }
            elif key in SCHEMA_LIST_KEYWORDS and isinstance(value, list):
                result[key] = [self._convert(member) for member in value]
            elif key in SCHEMA_KEYWORDS:
                result[key] = self._convert(value)
            elif isinstance(value, list):
                result[key] = list(value)
            else:
                result[key] = value

        return result
