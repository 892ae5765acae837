"""Генератор TypeScript клиентов из OpenAPI v3 спецификаций"""

from .errors import GeneratorError
from .generator import ApiClientGenerator, generate_client, render, write_project

__all__ = [
    "ApiClientGenerator",
    "GeneratorError",
    "generate_client",
    "render",
    "write_project",
]
