"""
Главный модуль генератора - чистый интерфейс
"""

import logging
import os
from typing import Any, Dict

from .errors import OutputPathError
from .internal.generator.client_generator import ClientGenerator
from .internal.parser.loader import load_specification
from .internal.parser.openapi import OpenApiParser
from .internal.types.models import Project

logger = logging.getLogger(__name__)


class ApiClientGenerator:
    """Чистый интерфейс для генерации TypeScript клиентов"""

    def __init__(self, openapi_spec: Dict[str, Any], base_uri: str = ""):
        self.document, self.components = OpenApiParser(openapi_spec, base_uri).parse()

    def generate(self) -> Project:
        """Генерация проекта клиента"""
        return ClientGenerator(self.document, self.components).generate()


def generate_client(openapi_spec: Dict[str, Any], base_uri: str = "") -> Project:
    """Создание TypeScript клиента из OpenAPI спецификации"""
    return ApiClientGenerator(openapi_spec, base_uri).generate()


def check_output_path(output: str) -> None:
    """Выходной путь должен отсутствовать или быть директорией"""
    if os.path.exists(output) and not os.path.isdir(output):
        raise OutputPathError(output)


def write_project(project: Project, output: str) -> None:
    """Сохранение файлов проекта, ничего не пишется если путь занят файлом"""
    check_output_path(output)

    for code_file in project.files:
        path = os.path.join(output, code_file.file_name)
        os.makedirs(os.path.dirname(path), exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(str(code_file))

        logger.debug(f"Written {path}")


def render(source: str, output: str) -> Project:
    """Загрузка спецификации, генерация и запись клиента в output"""
    check_output_path(output)

    openapi_spec, base_uri = load_specification(source)
    project = generate_client(openapi_spec, base_uri)
    write_project(project, output)
    return project
