"""
Тесты разрешения $ref по разыменованным компонентам
"""

import pytest

from openapi_ts_client.errors import (
    CategoryMismatchError,
    InvalidReferenceError,
    ReferenceNotFoundError,
)
from openapi_ts_client.internal.generator.resolver import (
    resolve_parameter,
    resolve_reference,
    resolve_schema,
    split_reference,
)
from openapi_ts_client.internal.types.openapi import (
    Parameter,
    Reference,
    ResolvedComponents,
)


@pytest.fixture
def components():
    return ResolvedComponents.model_validate(
        {
            "schemas": {"Pet": {"type": "object"}},
            "parameters": {
                "Limit": {"name": "limit", "in": "query", "schema": {"type": "integer"}}
            },
            "responses": {"Ok": {"description": "OK"}},
        }
    )


class TestResolveReference:
    """Одношаговое разрешение ссылок"""

    def test_split_reference(self):
        assert split_reference("#/components/schemas/Pet") == ("schemas", "Pet")

    def test_resolves_concrete_object(self, components):
        resolved = resolve_reference("#/components/parameters/Limit", "parameters", components)

        assert resolved.name == "limit"
        assert resolved.in_ == "query"

    def test_missing_name(self, components):
        """Отсутствующий ключ - ошибка с именем ключа"""
        with pytest.raises(ReferenceNotFoundError) as exc_info:
            resolve_reference("#/components/responses/NotFound", "responses", components)

        assert exc_info.value.name == "NotFound"
        assert "NotFound" in str(exc_info.value)

    def test_category_mismatch(self, components):
        with pytest.raises(CategoryMismatchError) as exc_info:
            resolve_reference("#/components/schemas/Pet", "responses", components)

        assert exc_info.value.expected == "responses"
        assert exc_info.value.actual == "schemas"

    def test_malformed_reference(self, components):
        with pytest.raises(InvalidReferenceError):
            resolve_reference("#/components/schemas/Pet/extra", "schemas", components)

    def test_inline_parameter_is_returned_as_is(self, components):
        parameter = Parameter.model_validate({"name": "q", "in": "query"})

        assert resolve_parameter(parameter, components) is parameter

    def test_resolve_schema_from_model_and_mapping(self, components):
        expected = {"type": "object"}

        assert resolve_schema(Reference(ref="#/components/schemas/Pet"), components) == expected
        assert resolve_schema({"$ref": "#/components/schemas/Pet"}, components) == expected
        assert resolve_schema({"type": "string"}, components) == {"type": "string"}
