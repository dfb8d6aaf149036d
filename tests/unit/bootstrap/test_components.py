import os
from pathlib import Path
from unittest.mock import patch

import pytest

from image_prompter.bootstrap import components
from image_prompter.bootstrap.bootstrapper import bootstrap_prompt_service
from image_prompter.components.configuration.configuration_interface import (
    ConfigurationInterface,
)
from image_prompter.components.logger.logger_interface import LoggerInterface
from image_prompter.dependencies.services import get_pipeline_config
from image_prompter.services.PromptService.prompt_service import PromptService


@pytest.fixture(autouse=True)
def reset_components(monkeypatch):
    for name in ("GEMINI_API_KEY", "API_KEY", "MODEL_NAME", "TRACING_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    components.ComponentsMeta._instances.clear()
    yield
    components.ComponentsMeta._instances.clear()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    (tmp_path / "development.env").write_text(
        "GEMINI_API_KEY=file-key\nMODEL_NAME=gemini-test\n", encoding="utf-8"
    )
    return tmp_path


@pytest.mark.unit
class TestComponentsRegistry:
    def test_registers_configuration_and_logger(self, config_dir: Path) -> None:
        registry = components.Components("development", str(config_dir))

        assert isinstance(
            registry.get_component(ConfigurationInterface), ConfigurationInterface
        )
        assert isinstance(registry.get_component(LoggerInterface), LoggerInterface)

    def test_same_instance_per_environment(self, config_dir: Path) -> None:
        first = components.Components("development", str(config_dir))
        second = components.Components("development", str(config_dir))

        assert first is second

    def test_invalid_environment_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError) as exc_info:
            components.Components("testing", str(tmp_path))

        assert "Invalid environment" in str(exc_info.value)

    def test_unknown_component_raises(self, config_dir: Path) -> None:
        registry = components.Components("development", str(config_dir))

        with pytest.raises(ValueError):
            registry.get_component(PromptService)

    def test_tracing_not_instrumented_in_test_environment(
        self, tmp_path: Path, monkeypatch
    ) -> None:
        monkeypatch.setenv("TRACING_ENABLED", "true")

        with patch.object(components, "_is_test_environment", return_value=True):
            with patch.object(components, "_instrument_tracing") as instrument:
                components.Components("production", str(tmp_path))

        instrument.assert_not_called()

    def test_tracing_instrumented_outside_tests(
        self, tmp_path: Path, monkeypatch
    ) -> None:
        monkeypatch.setenv("TRACING_ENABLED", "true")

        with patch.object(components, "_is_test_environment", return_value=False):
            with patch.object(components, "_instrument_tracing") as instrument:
                components.Components("production", str(tmp_path))

        instrument.assert_called_once()


@pytest.mark.unit
class TestBootstrap:
    def test_pipeline_config_resolved_from_configuration(self, config_dir: Path) -> None:
        registry = components.Components("development", str(config_dir))

        config = get_pipeline_config(registry)

        assert config.api_key == "file-key"
        assert config.model_name == "gemini-test"

    def test_pipeline_config_without_key(self, tmp_path: Path) -> None:
        registry = components.Components("staging", str(tmp_path))

        assert get_pipeline_config(registry).api_key is None

    def test_bootstrap_returns_prompt_service(self, config_dir: Path) -> None:
        service = bootstrap_prompt_service(env="development", config_path=str(config_dir))

        assert isinstance(service, PromptService)
        assert service.config.api_key == "file-key"


@pytest.mark.unit
class TestComponentsOTELEnvVarsValidation:
    """Test suite for OpenTelemetry/Langfuse environment variables validation."""

    def test_otel_validation_raises_error_when_endpoint_not_set(self, monkeypatch):
        """Test that OTEL validation raises RuntimeError when OTEL_EXPORTER_OTLP_ENDPOINT is not set."""
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_HEADERS", raising=False)
        monkeypatch.delenv("LANGFUSE_PUBLIC_KEY", raising=False)
        monkeypatch.delenv("LANGFUSE_SECRET_KEY", raising=False)

        with pytest.raises(RuntimeError) as exc_info:
            components._validate_otel_env_vars()

        assert "OTEL_EXPORTER_OTLP_ENDPOINT" in str(exc_info.value)
        assert "not set or is empty" in str(exc_info.value)

    def test_otel_validation_raises_error_when_headers_not_set(self, monkeypatch):
        """Test that OTEL validation raises RuntimeError when headers are not set."""
        monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "https://example.com/otlp")
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_HEADERS", raising=False)
        monkeypatch.delenv("LANGFUSE_PUBLIC_KEY", raising=False)
        monkeypatch.delenv("LANGFUSE_SECRET_KEY", raising=False)

        with pytest.raises(RuntimeError) as exc_info:
            components._validate_otel_env_vars()

        assert "OTEL_EXPORTER_OTLP_HEADERS" in str(exc_info.value)

    def test_otel_validation_succeeds_with_direct_headers(self, monkeypatch):
        monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "https://example.com/otlp")
        monkeypatch.setenv("OTEL_EXPORTER_OTLP_HEADERS", "Authorization=Basic dGVzdA==")

        components._validate_otel_env_vars()

    def test_otel_validation_skipped_with_langfuse_native(self, monkeypatch):
        """Test that all three Langfuse variables skip OTEL validation."""
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_HEADERS", raising=False)
        monkeypatch.setenv("LANGFUSE_PUBLIC_KEY", "pk-test")
        monkeypatch.setenv("LANGFUSE_SECRET_KEY", "sk-test")
        monkeypatch.setenv("LANGFUSE_BASE_URL", "https://cloud.langfuse.com")

        components._validate_otel_env_vars()

        assert "OTEL_EXPORTER_OTLP_HEADERS" not in os.environ
