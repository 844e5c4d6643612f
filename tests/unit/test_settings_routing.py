import json

import pytest

from config import EVALUATION_KEY, QUESTION_KEY, SUMMARY_KEY, load_app_registry
from config.settings import Settings
from generators.types import EvaluationOut, Question, SummaryOut

SCHEMAS = {QUESTION_KEY: Question, EVALUATION_KEY: EvaluationOut, SUMMARY_KEY: SummaryOut}


def _write_config(tmp_path, registry):
    path = tmp_path / "app_config.json"
    path.write_text(
        json.dumps(
            {
                "llm_routes": {
                    "fast": {
                        "name": "fast",
                        "base_url": "http://llm",
                        "endpoint": "/chat/completions",
                        "model": "fast-model",
                        "timeout_s": 5,
                    }
                },
                "registry": registry,
            }
        ),
        encoding="utf-8",
    )
    return path


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("QUESTION_COUNT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.DB_PATH.endswith(".db")
    assert settings.QUESTION_COUNT == 6
    assert settings.MAX_UPLOAD_BYTES == 10 * 1024 * 1024
    assert "SWIPE2024" in settings.REFERRAL_CODES


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("QUESTION_COUNT", "3")
    monkeypatch.setenv("STORE_BACKEND", "memory")
    settings = Settings(_env_file=None)
    assert settings.QUESTION_COUNT == 3
    assert settings.STORE_BACKEND == "memory"


def test_registry_resolves_all_generator_routes(tmp_path):
    path = _write_config(tmp_path, {key: "fast" for key in SCHEMAS})
    registry = load_app_registry(path, SCHEMAS)
    assert set(registry) == set(SCHEMAS)
    route, schema = registry[SUMMARY_KEY]
    assert route.model == "fast-model"
    assert route.max_retries == 1
    assert schema is SummaryOut


def test_registry_requires_every_entry(tmp_path):
    path = _write_config(tmp_path, {QUESTION_KEY: "fast"})
    with pytest.raises(KeyError):
        load_app_registry(path, SCHEMAS)


def test_registry_rejects_unknown_route(tmp_path):
    path = _write_config(tmp_path, {key: "slow" for key in SCHEMAS})
    with pytest.raises(KeyError):
        load_app_registry(path, SCHEMAS)
