import logging

import pytest
from pydantic import ValidationError

from redirect_gateway import PaymentGateway
from redirect_gateway.config import Configuration, Credentials, Settings, configure_logging
from redirect_gateway.exceptions import ConfigurationError


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("GATEWAY_GATEWAY_URL", "https://sandbox.gateway.test/")
    monkeypatch.setenv("GATEWAY_MERCHANT_ID", "env_merchant")
    monkeypatch.setenv("GATEWAY_PUBLIC_KEY", "env_public")
    monkeypatch.setenv("GATEWAY_PRIVATE_KEY", "env_private")
    monkeypatch.setenv("GATEWAY_TIMEOUT", "5")


def test_settings_from_environment(env):
    settings = Settings(_env_file=None)

    assert settings.merchant_id == "env_merchant"
    assert settings.timeout == 5.0
    assert settings.api_version == "2"


def test_configuration_from_settings(env):
    config = Configuration.from_settings(Settings(_env_file=None))

    assert config.private_key == "env_private"
    assert config.base_merchant_url() == "https://sandbox.gateway.test/merchants/env_merchant"


def test_gateway_from_settings(env):
    gateway = PaymentGateway.from_settings(Settings(_env_file=None))
    assert gateway.credit_card.transparent_redirect_create_url() == (
        "https://sandbox.gateway.test/merchants/env_merchant"
        "/payment_methods/all/create_via_transparent_redirect_request"
    )


def test_configuration_is_immutable(config):
    with pytest.raises(ValidationError):
        config.gateway_url = "https://elsewhere.test"


def test_credentials_repr_hides_private_key(config):
    assert config.private_key not in repr(config.credentials)


@pytest.mark.parametrize("public_key,private_key,missing", [
    ("", "priv", ["public_key"]),
    ("pub", "", ["private_key"]),
    ("", "", ["public_key", "private_key"]),
])
def test_require_keys(public_key, private_key, missing):
    config = Configuration(
        gateway_url="https://sandbox.gateway.test",
        credentials=Credentials(merchant_id="m", public_key=public_key, private_key=private_key),
    )
    with pytest.raises(ConfigurationError) as excinfo:
        config.require_keys()
    assert excinfo.value.details == {"missing": missing}
    assert excinfo.value.to_dict()["error_code"] == "gateway:configuration"


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Configuration(
            gateway_url="https://sandbox.gateway.test",
            credentials=Credentials(merchant_id="m", public_key="pub", private_key="priv"),
            timeout=0,
        )


def test_configure_logging_uses_level_and_format(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(Settings(_env_file=None, log_level="DEBUG"))

    assert calls == [{
        "level": logging.DEBUG,
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    }]
