"""Утилиты для работы с именами в генерируемом TypeScript коде"""

import json
import re

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Зарезервированные слова TypeScript - в роли имени свойства их кавычим
RESERVED_WORDS = frozenset(
    {
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "new",
        "null",
        "return",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "implements",
        "interface",
        "let",
        "package",
        "private",
        "protected",
        "public",
        "static",
        "yield",
    }
)


def capitalize(value: str) -> str:
    """
    Делает заглавной только первую букву, остальное не трогает.

    Examples:
        >>> capitalize("requestBodies")
        'RequestBodies'
    """
    return value[:1].upper() + value[1:]


def is_valid_identifier(value: str) -> bool:
    """Можно ли использовать строку как идентификатор без кавычек"""
    return bool(IDENTIFIER_RE.match(value)) and value not in RESERVED_WORDS


def property_name(name: str) -> str:
    """
    Имя свойства для TypeScript: идентификатор как есть, иначе строковый литерал.

    Examples:
        >>> property_name("petId")
        'petId'
        >>> property_name("X-Request-Id")
        '"X-Request-Id"'
    """
    return name if is_valid_identifier(name) else json.dumps(name)
