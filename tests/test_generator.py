"""
Тесты для генератора TypeScript клиентов
"""

import pytest

from openapi_ts_client.errors import InvalidDocumentError, MissingOperationIdError
from openapi_ts_client.generator import ApiClientGenerator, generate_client
from openapi_ts_client.internal.generator.client_generator import DEFAULT_BASE_URL

MODEL_FILES = [
    "models/schemas.ts",
    "models/parameters.ts",
    "models/requestBodies.ts",
    "models/responses.ts",
]


def minimal_spec(**extra):
    return {"openapi": "3.0.3", "info": {"title": "Test", "version": "1"}, **extra}


class TestProjectLayout:
    """Состав и содержимое файлов проекта"""

    def test_files(self, petstore_spec):
        project = ApiClientGenerator(petstore_spec).generate()

        assert [f.file_name for f in project.files] == MODEL_FILES + ["client.ts"]

    def test_header(self, petstore_spec):
        project = generate_client(petstore_spec)

        for code_file in project.files:
            assert str(code_file).startswith("/**\n * DO NOT MODIFY")

    def test_schema_declarations(self, petstore_spec):
        schemas = str(generate_client(petstore_spec).get_file("models/schemas.ts"))

        assert (
            "export type Pet = {\n"
            "    id: number;\n"
            "    name: string;\n"
            "    tag?: string | null;\n"
            '    status?: "available" | "sold";\n'
            "};"
        ) in schemas
        assert "import" not in schemas

    def test_empty_model_file(self):
        project = generate_client(minimal_spec())

        for file_name in MODEL_FILES:
            assert str(project.get_file(file_name)).endswith("\n\nexport {};\n")

    def test_responses_order(self, petstore_spec):
        """Сначала типы ответов операций, затем components/responses"""
        responses = str(generate_client(petstore_spec).get_file("models/responses.ts"))

        positions = [
            responses.index("export type listPetsResponse"),
            responses.index("export type createPetResponse"),
            responses.index("export type showPetByIdResponse"),
            responses.index("export type deletePetResponse"),
            responses.index("export type PetCreated"),
            responses.index("export type Error"),
        ]
        assert positions == sorted(positions)


class TestImports:
    """Импорты пространств имен моделей"""

    def test_model_imports(self, petstore_spec):
        project = generate_client(petstore_spec)

        request_bodies = str(project.get_file("models/requestBodies.ts"))
        assert 'import * as Schemas from "./schemas";' in request_bodies

        responses = str(project.get_file("models/responses.ts"))
        assert 'import * as Schemas from "./schemas";' in responses
        assert 'import * as Responses from "./responses";' in responses

    def test_client_imports_only_used_namespaces(self, petstore_spec):
        client = str(generate_client(petstore_spec).get_file("client.ts"))

        assert (
            'import * as RequestBodies from "./models/requestBodies";\n'
            'import * as Parameters from "./models/parameters";\n'
            'import * as Responses from "./models/responses";'
        ) in client
        assert "import * as Schemas" not in client


class TestClient:
    """Класс Client"""

    def test_base_url_from_servers(self, petstore_spec):
        client = str(generate_client(petstore_spec).get_file("client.ts"))

        assert 'readonly baseUrl: string = "https://petstore.example.com/v1";' in client

    def test_default_base_url(self):
        client = str(generate_client(minimal_spec()).get_file("client.ts"))

        assert f'readonly baseUrl: string = "{DEFAULT_BASE_URL}";' in client

    def test_method_order(self, petstore_spec):
        """GET раньше POST независимо от порядка в документе"""
        client = str(generate_client(petstore_spec).get_file("client.ts"))

        positions = [
            client.index("listPets("),
            client.index("createPet("),
            client.index("showPetById("),
            client.index("deletePet("),
        ]
        assert positions == sorted(positions)

    def test_runtime_is_included(self, petstore_spec):
        client = str(generate_client(petstore_spec).get_file("client.ts"))

        assert "export class Client {" in client
        assert "performRequest(" in client
        assert "class ResponseValidationError extends Error" in client

    def test_deterministic(self, petstore_spec):
        first = generate_client(petstore_spec)
        second = generate_client(petstore_spec)

        assert [str(f) for f in first.files] == [str(f) for f in second.files]


class TestInvalidDocuments:
    """Ошибки в документе"""

    def test_missing_operation_id(self):
        spec = minimal_spec(paths={"/pets": {"get": {"responses": {}}}})

        with pytest.raises(MissingOperationIdError):
            generate_client(spec)

    def test_duplicate_operation_id(self):
        operation = {"operationId": "getPet", "responses": {}}
        spec = minimal_spec(
            paths={"/a": {"get": dict(operation)}, "/b": {"get": dict(operation)}}
        )

        with pytest.raises(InvalidDocumentError) as exc_info:
            generate_client(spec)

        assert "getPet" in str(exc_info.value)


class TestRecursiveSchemas:
    def test_recursive_schema(self):
        """Рекурсивная модель не зацикливает генерацию"""
        spec = minimal_spec(
            paths={
                "/tree": {
                    "get": {
                        "operationId": "getTree",
                        "responses": {
                            "200": {
                                "description": "Tree",
                                "content": {
                                    "application/json": {
                                        "schema": {"$ref": "#/components/schemas/Node"}
                                    }
                                },
                            }
                        },
                    }
                }
            },
            components={
                "schemas": {
                    "Node": {
                        "type": "object",
                        "properties": {
                            "children": {
                                "type": "array",
                                "items": {"$ref": "#/components/schemas/Node"},
                            }
                        },
                    }
                }
            },
        )

        project = generate_client(spec)

        schemas = str(project.get_file("models/schemas.ts"))
        assert "children?: Schemas.Node[];" in schemas

        client = str(project.get_file("client.ts"))
        assert '"children": {"type": "array", "items": {}}' in client
