import logging
from typing import Any, Dict, Tuple

import jsonref
from pydantic import ValidationError

from ...errors import InvalidDocumentError
from ..types.openapi import Document, ResolvedComponents

logger = logging.getLogger(__name__)


class OpenApiParser:
    """Парсер OpenAPI спецификации"""

    def __init__(self, openapi_dict: Dict[str, Any], base_uri: str = ""):
        self.openapi_dict = openapi_dict
        self.base_uri = base_uri

    def parse(self) -> Tuple[Document, ResolvedComponents]:
        """Разбор спецификации в документ и разыменованные компоненты"""
        self._check_version()

        try:
            document = Document.model_validate(self.openapi_dict)
        except ValidationError as exc:
            raise InvalidDocumentError(f"Некорректная OpenAPI спецификация:\n{exc}") from exc

        return document, self._resolve_components()

    def _check_version(self):
        version = self.openapi_dict.get("openapi")
        if isinstance(version, str) and version.startswith("3."):
            return

        if "swagger" in self.openapi_dict:
            raise InvalidDocumentError(
                f"Swagger {self.openapi_dict['swagger']} не поддерживается, "
                "сконвертируйте спецификацию в OpenAPI v3"
            )
        raise InvalidDocumentError(
            f"Поддерживается только OpenAPI v3, получена версия {version!r}"
        )

    def _resolve_components(self) -> ResolvedComponents:
        try:
            dereferenced = jsonref.replace_refs(
                self.openapi_dict, base_uri=self.base_uri, proxies=False
            )
        except jsonref.JsonRefError as exc:
            raise InvalidDocumentError(f"Не удалось разыменовать $ref: {exc}") from exc

        logger.debug("Specification dereferenced")

        try:
            return ResolvedComponents.model_validate(dereferenced.get("components", {}))
        except ValidationError as exc:
            raise InvalidDocumentError(f"Некорректные components:\n{exc}") from exc
