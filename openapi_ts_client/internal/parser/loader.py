"""
Загрузка OpenAPI спецификации из файла (JSON/YAML) или по URL
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Tuple

import httpx
import yaml

from ...errors import InvalidDocumentError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_specification(source: str) -> Tuple[Dict[str, Any], str]:
    """
    Загружает спецификацию и возвращает ее вместе с base URI для $ref.

    Ключи приводятся к строкам (YAML превращает `200:` в число).
    """
    if is_url(source):
        logger.debug(f"Fetching specification from {source}")
        try:
            response = httpx.get(source, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise InvalidDocumentError(
                f"Не удалось загрузить спецификацию из {source}: {exc}"
            ) from exc
        text, base_uri = response.text, source
        is_yaml = source.split("?")[0].endswith(YAML_SUFFIXES)
    elif os.path.exists(source):
        path = Path(source)
        text = path.read_text(encoding="utf-8")
        base_uri = path.resolve().as_uri()
        is_yaml = path.suffix in YAML_SUFFIXES
    else:
        raise InvalidDocumentError(f"Файл спецификации {source} не найден")

    return parse_specification(text, is_yaml), base_uri


def parse_specification(text: str, is_yaml: bool = False) -> Dict[str, Any]:
    """Разбор текста спецификации; JSON пробуется первым, если формат не YAML"""
    try:
        data = yaml.safe_load(text) if is_yaml else _json_or_yaml(text)
    except yaml.YAMLError as exc:
        raise InvalidDocumentError(f"Не удалось разобрать спецификацию: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidDocumentError("Спецификация должна быть объектом")

    # default=str: YAML даты и прочие не-JSON значения
    return json.loads(json.dumps(data, default=str))


def _json_or_yaml(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return yaml.safe_load(text)
