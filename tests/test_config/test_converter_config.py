"""Tests for converter configuration."""
from __future__ import annotations

import pytest

from semantic_css.ai.client import DEFAULT_BASE_URL, DEFAULT_MODEL
from semantic_css.config import ConverterConfig


class TestConverterConfig:
    def test_defaults(self) -> None:
        config = ConverterConfig()
        assert config.extensions == (".html", ".jsx", ".tsx", ".vue")
        assert config.module_suffix == ".module.css"
        assert not config.compile
        assert not config.use_ai

    @pytest.mark.parametrize("name", ["a.html", "B.TSX", "dir/c.vue", "d.jsx"])
    def test_accepts(self, name: str) -> None:
        assert ConverterConfig().accepts(name)

    @pytest.mark.parametrize("name", ["a.css", "b.js", "html"])
    def test_rejects(self, name: str) -> None:
        assert not ConverterConfig().accepts(name)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ConverterConfig().compile = True  # type: ignore[misc]


class TestFromEnv:
    def test_empty_environment(self) -> None:
        config = ConverterConfig.from_env({})
        assert config.ai_api_key == ""
        assert config.ai_model == DEFAULT_MODEL
        assert config.ai_base_url == DEFAULT_BASE_URL

    def test_own_key_preferred(self) -> None:
        env = {"SEMANTIC_CSS_AI_API_KEY": "own", "OPENAI_API_KEY": "shared"}
        assert ConverterConfig.from_env(env).ai_api_key == "own"

    def test_openai_key_fallback(self) -> None:
        assert ConverterConfig.from_env({"OPENAI_API_KEY": "shared"}).ai_api_key == "shared"

    def test_model_and_endpoint(self) -> None:
        env = {"SEMANTIC_CSS_AI_MODEL": "gpt-4o-mini", "SEMANTIC_CSS_AI_BASE_URL": "http://localhost:8080/v1"}
        config = ConverterConfig.from_env(env)
        assert config.ai_model == "gpt-4o-mini"
        assert config.ai_base_url == "http://localhost:8080/v1"

    def test_overrides(self) -> None:
        config = ConverterConfig.from_env({}, compile=True, module_suffix=".css")
        assert config.compile
        assert config.module_suffix == ".css"

    def test_reads_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("SEMANTIC_CSS_AI_API_KEY", "from-env")
        assert ConverterConfig.from_env().ai_api_key == "from-env"
