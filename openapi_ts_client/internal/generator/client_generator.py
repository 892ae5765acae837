import json
import logging
from typing import Dict, List

from ...errors import InvalidDocumentError
from ..types.models import (
    Class,
    CodeBlock,
    CodeFile,
    Field,
    Import,
    KeywordType,
    Method,
    Project,
    TypeAlias,
    TypeReference,
)
from ..types.openapi import Document, ResolvedComponents
from .components import (
    render_parameters,
    render_request_bodies,
    render_responses,
    render_schemas,
)
from .operations import CompiledOperation, OperationCompiler
from .templates import templates

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:9000"

# Пространство имен TypeScript -> модуль в models/
MODEL_MODULES = {
    "Schemas": "schemas",
    "RequestBodies": "requestBodies",
    "Parameters": "parameters",
    "Responses": "responses",
}


class ClientGenerator:
    """Генератор TypeScript клиента: модели компонентов и класс Client"""

    def __init__(self, document: Document, components: ResolvedComponents):
        self.document = document
        self.components = components
        self.operation_compiler = OperationCompiler(components)
        self.project = Project(name="client")

    def generate(self) -> Project:
        """Основная генерация"""
        compiled = self._compile_paths()
        document_components = self.document.components

        self._add_model_file("schemas", render_schemas(document_components.schemas))
        self._add_model_file(
            "parameters", render_parameters(document_components.parameters)
        )
        self._add_model_file(
            "requestBodies", render_request_bodies(document_components.request_bodies)
        )
        self._add_model_file(
            "responses",
            [
                declaration
                for operation in compiled
                for declaration in operation.response_declarations
            ]
            + render_responses(document_components.responses),
        )
        self._add_client_file([operation.method for operation in compiled])

        return self.project

    @property
    def base_url(self) -> str:
        if self.document.servers:
            return self.document.servers[0].url
        return DEFAULT_BASE_URL

    def _compile_paths(self) -> List[CompiledOperation]:
        """Компиляция всех операций в порядке документа"""
        compiled = []
        seen_operation_ids: Dict[str, str] = {}

        for pattern, path_item in self.document.paths.items():
            if path_item.ref is not None:
                logger.warning(f"Path {pattern} uses $ref {path_item.ref}, it is not followed")

            for http_method, operation in path_item.operations():
                location = f"{http_method} {pattern}"
                operation_id = operation.operation_id
                if operation_id is not None and operation_id in seen_operation_ids:
                    raise InvalidDocumentError(
                        f"operationId {operation_id} используется дважды: "
                        f"{seen_operation_ids[operation_id]} и {location}"
                    )

                compiled.append(
                    self.operation_compiler.compile(
                        pattern, http_method, path_item.parameters, operation
                    )
                )
                seen_operation_ids[operation_id] = location

        logger.debug(f"Compiled {len(compiled)} operations")
        return compiled

    def _add_model_file(self, module: str, declarations: List[TypeAlias]) -> CodeFile:
        code_file = CodeFile(file_name=f"models/{module}.ts", header=templates.header)
        for declaration in declarations:
            code_file.add_statement(declaration)

        if not declarations:
            code_file.add_code_block(templates.empty_export)

        code_file.imports = self._namespace_imports(code_file, "./")
        return self.project.add_file(code_file)

    def _add_client_file(self, methods: List[Method]) -> CodeFile:
        client = Class(
            name="Client",
            fields=[
                Field(
                    name="baseUrl",
                    type=KeywordType(name="string"),
                    initializer=json.dumps(self.base_url),
                ),
                Field(
                    name="validator",
                    type=TypeReference(name="Validator"),
                    initializer="new Validator()",
                ),
            ],
            code_blocks=[
                CodeBlock(code=templates.constructor, order=3),
                CodeBlock(code=templates.remove_nulls, order=2),
                CodeBlock(code=templates.perform_request, order=1),
            ],
        )
        for method in methods:
            client.add_method(method)

        code_file = CodeFile(file_name="client.ts", header=templates.header)
        code_file.add_code_block(templates.client_preamble)
        code_file.add_statement(client)
        code_file.imports = self._namespace_imports(code_file, "./models/")
        return self.project.add_file(code_file)

    @staticmethod
    def _namespace_imports(code_file: CodeFile, base_path: str) -> List[Import]:
        """Импорты пространств имен моделей, которые реально используются в файле"""
        used = set()
        for reference in code_file.references():
            if reference.namespace is None:
                continue
            if reference.namespace not in MODEL_MODULES:
                logger.warning(
                    f"Unknown namespace {reference.namespace} in {code_file.file_name}"
                )
                continue
            used.add(reference.namespace)

        return [
            Import(alias=alias, module=f"{base_path}{module}")
            for alias, module in MODEL_MODULES.items()
            if alias in used
        ]
