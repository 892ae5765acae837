import argparse
import logging
import os
import sys

from openapi_ts_client.config import CONFIG_FILE_NAME, OpenApiConfig
from openapi_ts_client.errors import GeneratorError
from openapi_ts_client.generator import render


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openapi-ts-client",
        description="Генерация TypeScript клиента из OpenAPI v3 спецификации",
        epilog="Пример: openapi-ts-client -i openapi.yaml -o ./my-client",
    )
    parser.add_argument(
        "-i", "--input", type=str, help="Файл или URL OpenAPI спецификации"
    )
    parser.add_argument(
        "-o", "--output", type=str, help="Директория для генерации клиента"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=CONFIG_FILE_NAME,
        help="Путь к конфиг файлу (по умолчанию openapi.toml)",
    )
    parser.add_argument(
        "--init-config", action="store_true", help="Создать конфиг файл и выйти"
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Сохранить итоговые настройки в конфиг файл",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Подробный вывод (DEBUG)"
    )
    return parser


def generate(argv=None):
    """Универсальная команда генерации TypeScript клиента"""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    # Инициализация конфига
    if args.init_config:
        OpenApiConfig(input=args.input, output=args.output).save_to_file(args.config)
        print(f"✅ Создан конфиг файл {args.config}")
        return

    file_config = OpenApiConfig.from_file(args.config)
    if file_config:
        print(f"📋 Используется конфиг из {args.config}")
        config = file_config.merge_with_args(args)
    else:
        config = OpenApiConfig(input=args.input, output=args.output)

    # Проверка обязательных параметров
    if not config.input:
        print("❌ Ошибка: спецификация не указана ни в конфиге, ни в аргументах")
        sys.exit(1)
    if not config.output:
        print("❌ Ошибка: директория не указана ни в конфиге, ни в аргументах")
        sys.exit(1)

    print(f"🚀 Генерация клиента из {config.input}")

    try:
        project = render(config.input, config.output)
    except GeneratorError as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)

    print(f"✅ Сгенерировано файлов: {len(project.files)}")
    print(f"📦 Клиент создан в: {os.path.abspath(config.output)}")

    if args.save_config:
        config.save_to_file(args.config)
        print(f"💾 Конфиг сохранен в {args.config}")


if __name__ == "__main__":
    generate()
