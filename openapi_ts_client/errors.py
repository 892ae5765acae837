"""
Ошибки генератора
"""

from typing import Optional


class GeneratorError(Exception):
    """Базовая ошибка генерации клиента"""


class InvalidDocumentError(GeneratorError):
    """Спецификация не является корректным OpenAPI v3 документом"""


class MissingOperationIdError(InvalidDocumentError):
    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(
            f"Не найден operationId для {method.upper()} {path}, он обязателен"
        )


class ReferenceResolutionError(GeneratorError):
    """Базовая ошибка разрешения $ref"""

    def __init__(self, message: str, ref: str):
        self.ref = ref
        super().__init__(message)


class InvalidReferenceError(ReferenceResolutionError):
    def __init__(self, ref: str):
        super().__init__(
            f"Ссылка {ref} не соответствует формату #/components/<category>/<name>",
            ref,
        )


class CategoryMismatchError(ReferenceResolutionError):
    def __init__(self, ref: str, expected: str, actual: Optional[str]):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Попытка разрешить {ref} как {expected}, но ссылка указывает на {actual}",
            ref,
        )


class ReferenceNotFoundError(ReferenceResolutionError):
    def __init__(self, ref: str, category: str, name: str):
        self.category = category
        self.name = name
        super().__init__(f"Не удалось разрешить {category} {name} ({ref})", ref)


class OutputPathError(GeneratorError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Путь {path} уже существует и не является директорией")
