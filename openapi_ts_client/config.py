"""
Конфигурация для генерации TypeScript клиента
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "openapi.toml"


@dataclass
class OpenApiConfig:
    """Конфигурация генератора: откуда брать спецификацию и куда писать клиент"""

    input: Optional[str] = None
    output: Optional[str] = None

    @classmethod
    def from_file(cls, config_path: str = CONFIG_FILE_NAME) -> Optional["OpenApiConfig"]:
        """Загрузка конфигурации из файла"""
        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except toml.TomlDecodeError as exc:
            logger.warning(f"Config {config_path} is malformed and ignored: {exc}")
            return None

        return cls(
            input=config_data.get("input"),
            output=config_data.get("output"),
        )

    def save_to_file(self, config_path: str = CONFIG_FILE_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            key: value
            for key, value in (("input", self.input), ("output", self.output))
            if value is not None
        }

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "OpenApiConfig":
        """Объединение с аргументами командной строки"""
        return OpenApiConfig(
            input=args.input or self.input,
            output=args.output or self.output,
        )
