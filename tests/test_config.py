"""
Тесты для системы конфигурации
"""

import os
import tempfile

from openapi_ts_client.config import CONFIG_FILE_NAME, OpenApiConfig


class TestOpenApiConfig:
    """Тесты конфигурации генератора"""

    def test_config_creation(self):
        """Тест создания конфигурации"""
        config = OpenApiConfig(input="openapi.yaml", output="client")

        assert config.input == "openapi.yaml"
        assert config.output == "client"

    def test_config_save_and_load(self):
        """Тест сохранения и загрузки конфигурации"""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = os.path.join(temp_dir, "test_openapi.toml")

            # Создаем и сохраняем конфиг
            original_config = OpenApiConfig(
                input="http://api.example.com/openapi.json", output="example_client"
            )
            original_config.save_to_file(config_path)

            # Загружаем конфиг
            loaded_config = OpenApiConfig.from_file(config_path)

            assert loaded_config is not None
            assert loaded_config.input == "http://api.example.com/openapi.json"
            assert loaded_config.output == "example_client"

    def test_partial_config_is_saved_without_empty_keys(self, tmp_path):
        config_path = tmp_path / CONFIG_FILE_NAME
        OpenApiConfig(input="spec.json").save_to_file(str(config_path))

        assert "output" not in config_path.read_text()
        assert OpenApiConfig.from_file(str(config_path)).output is None

    def test_config_file_not_exists(self):
        """Тест загрузки несуществующего конфига"""
        config = OpenApiConfig.from_file("nonexistent.toml")
        assert config is None

    def test_malformed_config(self, tmp_path):
        config_path = tmp_path / CONFIG_FILE_NAME
        config_path.write_text("input = ")

        assert OpenApiConfig.from_file(str(config_path)) is None

    def test_config_merge_with_args(self):
        """Тест объединения конфига с аргументами"""
        config = OpenApiConfig(input="openapi.yaml", output="original_client")

        # Мокаем args
        class MockArgs:
            def __init__(self):
                self.input = "https://api.new.com/openapi.json"
                self.output = None

        args = MockArgs()
        merged = config.merge_with_args(args)

        assert merged.input == "https://api.new.com/openapi.json"  # Переписан из args
        assert merged.output == "original_client"  # Остался из config

    def test_default_values(self):
        """Тест значений по умолчанию"""
        config = OpenApiConfig()

        assert config.input is None
        assert config.output is None
