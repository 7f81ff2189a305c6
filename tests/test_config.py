"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from adgate.core.config import Settings
from adgate.shared.security.signature import SignatureConfig


class TestSettings:
    """Tests for Settings defaults and validation."""

    def test_signature_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.hmac_algorithm == "sha512"
        assert settings.hmac_header == "authorization"
        assert settings.hmac_identifier == "APP"
        assert settings.hmac_max_interval == 600
        assert settings.hmac_min_interval == 0

    def test_unknown_algorithm_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(hmac_algorithm="rot13", _env_file=None)

    def test_shake_algorithm_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(hmac_algorithm="shake_256", _env_file=None)

    def test_algorithm_lowercased(self) -> None:
        assert Settings(hmac_algorithm="SHA256", _env_file=None).hmac_algorithm == "sha256"

    def test_header_lowercased(self) -> None:
        assert Settings(hmac_header="X-Signature", _env_file=None).hmac_header == "x-signature"

    def test_negative_interval_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(hmac_max_interval=-1, _env_file=None)

    def test_environment_variables(self, monkeypatch) -> None:
        monkeypatch.setenv("HMAC_SECRET", "from-env")
        monkeypatch.setenv("DIRECTORY_OPTIONS", '{"url": "ldap://dc"}')
        settings = Settings(_env_file=None)
        assert settings.hmac_secret.get_secret_value() == "from-env"
        assert settings.directory_options == {"url": "ldap://dc"}

    def test_secret_hidden_in_repr(self) -> None:
        assert "s3cret" not in repr(Settings(hmac_secret="s3cret", _env_file=None))

    def test_signature_config_from_settings(self) -> None:
        settings = Settings(hmac_secret="abc", hmac_max_interval=30, _env_file=None)
        config = SignatureConfig.from_settings(settings)
        assert config.secret == b"abc"
        assert config.max_interval == 30
