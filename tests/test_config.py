"""
설정 관리 테스트 모듈

시스템 설정 관리 기능을 테스트합니다.
"""

from pathlib import Path

import pytest

from upstream_lister.config.settings import Settings, get_settings
from upstream_lister.exceptions import ConfigurationException


class TestSettings:
    """설정 클래스 테스트"""

    def test_default_settings(self):
        """기본 설정 테스트"""
        settings = Settings()

        assert settings.go_binary_path == "go"
        assert settings.go_env == []
        assert settings.propagate_auth is False
        assert settings.propagate_auth_patterns == []
        assert settings.list_timeout == 300
        assert settings.terminate_grace_period == 0.5
        assert settings.temp_root is None
        assert settings.log_level == "INFO"
        assert settings.metrics_enabled is True

    def test_settings_from_env(self, monkeypatch):
        """환경 변수로부터 설정 로드 테스트"""
        monkeypatch.setenv("GO_BINARY_PATH", "/usr/local/go/bin/go")
        monkeypatch.setenv("GO_ENV", '["GOPROXY=direct", "GOPRIVATE=example.org"]')
        monkeypatch.setenv("PROPAGATE_AUTH", "true")
        monkeypatch.setenv("PROPAGATE_AUTH_PATTERNS", '["example.org", "*.corp.internal"]')
        monkeypatch.setenv("LIST_TIMEOUT", "60")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.go_binary_path == "/usr/local/go/bin/go"
        assert settings.go_env == ["GOPROXY=direct", "GOPRIVATE=example.org"]
        assert settings.propagate_auth is True
        assert settings.propagate_auth_patterns == ["example.org", "*.corp.internal"]
        assert settings.list_timeout == 60
        assert settings.log_level == "DEBUG"

    def test_validation_success(self, tmp_path):
        """유효성 검증 성공 테스트"""
        settings = Settings(
            go_env=["GOPROXY=direct", "GOFLAGS="],
            propagate_auth_patterns=["example.org"],
            temp_root=str(tmp_path / "sandboxes")
        )
        settings.validate_configuration()

        assert (tmp_path / "sandboxes").is_dir()

    @pytest.mark.parametrize("entry", ["GOPROXY", "=direct"])
    def test_validation_bad_go_env(self, entry):
        """잘못된 GO_ENV 항목 테스트"""
        settings = Settings(go_env=[entry])

        with pytest.raises(ConfigurationException, match="GO_ENV"):
            settings.validate_configuration()

    def test_validation_empty_pattern(self):
        """빈 패턴 거부 테스트"""
        settings = Settings(propagate_auth_patterns=["example.org", " "])

        with pytest.raises(ConfigurationException, match="PROPAGATE_AUTH_PATTERNS"):
            settings.validate_configuration()

    def test_validation_negative_timeout(self):
        """음수 타임아웃 거부 테스트"""
        settings = Settings(list_timeout=-1)

        with pytest.raises(ConfigurationException, match="LIST_TIMEOUT"):
            settings.validate_configuration()


class TestGetSettings:
    """설정 팩토리 함수 테스트"""

    def test_get_settings_singleton(self):
        """설정 싱글톤 패턴 테스트"""
        get_settings.cache_clear()

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2
        get_settings.cache_clear()

    def test_get_settings_validation(self, monkeypatch):
        """설정 팩토리 유효성 검증 테스트"""
        get_settings.cache_clear()
        monkeypatch.setenv("GO_ENV", '["NOT_AN_ASSIGNMENT"]')

        with pytest.raises(ConfigurationException):
            get_settings()
        get_settings.cache_clear()

    @pytest.mark.parametrize("key, value", [
        ("GO_ENV", "GOPROXY=direct"),
        ("PROPAGATE_AUTH_PATTERNS", "example.org"),
        ("LIST_TIMEOUT", "soon"),
    ])
    def test_get_settings_unparsable_env(self, monkeypatch, key, value):
        """해석할 수 없는 환경 변수 값 테스트"""
        get_settings.cache_clear()
        monkeypatch.setenv(key, value)

        with pytest.raises(ConfigurationException, match=key.lower()):
            get_settings()
        get_settings.cache_clear()
