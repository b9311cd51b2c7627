import base64

import pytest
from pydantic import ValidationError

from hermes_sdk import EbayClient
from hermes_sdk.core.config import CredentialStore, EbayConfig, EbaySettings, Environment, RetryPolicy
from hermes_sdk.core.errors import ConfigError, MissingCredentialError


def test_environment_urls():
    assert Environment.SANDBOX.api_base_url == "https://api.sandbox.ebay.com"
    assert Environment.PRODUCTION.api_base_url == "https://api.ebay.com"
    assert Environment.SANDBOX.token_url == "https://api.sandbox.ebay.com/identity/v1/oauth2/token"
    assert Environment.PRODUCTION.host_url("apiz") == "https://apiz.ebay.com"
    assert Environment.SANDBOX.host_url("apix") == "https://apix.sandbox.ebay.com"
    assert Environment.PRODUCTION.host_url("api") == "https://api.ebay.com"


def test_retry_policy_backoff_doubles_and_caps():
    policy = RetryPolicy(max_retries=5, backoff_base=0.5, backoff_max=3.0)
    assert [policy.backoff(n) for n in range(1, 6)] == [0.5, 1.0, 2.0, 3.0, 3.0]


def test_config_defaults():
    config = EbayConfig(app_id="a", cert_id="c")
    assert config.sandbox is True
    assert config.marketplace_id == "EBAY_US"
    assert config.timeout == 30.0
    assert config.token_safety_margin == 60.0
    assert config.retry.max_retries == 2
    assert config.base_url == "https://api.sandbox.ebay.com"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"timeout": 0},
        {"environment": "staging"},
        {"token_safety_margin": -1},
        {"retry": {"max_retries": -1}},
    ],
)
def test_invalid_config_raises_config_error(kwargs):
    with pytest.raises(ConfigError) as exc_info:
        EbayConfig(app_id="a", cert_id="c", **kwargs)

    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_invalid_retry_policy_raises_config_error():
    with pytest.raises(ConfigError):
        RetryPolicy(backoff_base=-0.5)


def test_bad_sandbox_flag_raises_config_error(monkeypatch):
    monkeypatch.setenv("EBAY_SANDBOX", "maybe")

    with pytest.raises(ConfigError):
        EbaySettings(_env_file=None)


def test_with_helpers_return_copies():
    base = EbayConfig()
    config = base.with_app_id("app").with_cert_id("cert").with_dev_id("dev").with_sandbox(False)

    assert base.app_id == ""
    assert base.sandbox is True
    assert config.app_id == "app"
    assert config.cert_id == "cert"
    assert config.dev_id == "dev"
    assert config.environment is Environment.PRODUCTION
    assert config.with_oauth_token("user-token").oauth_token == "user-token"


@pytest.mark.parametrize(
    "app_id, cert_id, missing",
    [
        ("", "cert", "app_id"),
        ("app", "", "cert_id"),
        ("   ", "cert", "app_id"),
    ],
)
def test_credential_store_fails_fast(app_id, cert_id, missing):
    with pytest.raises(MissingCredentialError) as exc_info:
        CredentialStore(EbayConfig(app_id=app_id, cert_id=cert_id))

    assert exc_info.value.field == missing
    assert exc_info.value.environment == "sandbox"
    assert isinstance(exc_info.value, ConfigError)


def test_dev_id_is_optional():
    store = CredentialStore(EbayConfig(app_id="app", cert_id="cert"))
    assert store.dev_id is None


def test_basic_auth_header():
    store = CredentialStore(EbayConfig(app_id="app", cert_id="cert"))
    expected = base64.b64encode(b"app:cert").decode("utf-8")
    assert store.basic_auth_header() == f"Basic {expected}"


def test_credential_store_repr_hides_cert_id():
    store = CredentialStore(EbayConfig(app_id="my-application-id", cert_id="super-secret-cert"))
    assert "super-secret-cert" not in repr(store)
    assert "my-application-id" not in repr(store)


def test_client_construction_without_credentials_raises_config_error():
    with pytest.raises(ConfigError):
        EbayClient(EbayConfig(environment=Environment.PRODUCTION, app_id="app"))


def test_from_settings_picks_sandbox_credentials():
    settings = EbaySettings(
        _env_file=None,
        ebay_sandbox=True,
        ebay_app_id_sandbox="sb-app",
        ebay_cert_id_sandbox="sb-cert",
        ebay_app_id_production="prod-app",
        ebay_cert_id_production="prod-cert",
    )
    config = EbayConfig.from_settings(settings)

    assert config.environment is Environment.SANDBOX
    assert config.app_id == "sb-app"
    assert config.cert_id == "sb-cert"


def test_from_settings_picks_production_credentials():
    settings = EbaySettings(
        _env_file=None,
        ebay_sandbox=False,
        ebay_app_id_production="prod-app",
        ebay_cert_id_production="prod-cert",
        ebay_dev_id_production="prod-dev",
        ebay_marketplace_id="EBAY_DE",
    )
    config = EbayConfig.from_settings(settings)

    assert config.environment is Environment.PRODUCTION
    assert config.app_id == "prod-app"
    assert config.dev_id == "prod-dev"
    assert config.marketplace_id == "EBAY_DE"


def test_settings_read_environment_variables(monkeypatch):
    monkeypatch.setenv("EBAY_SANDBOX", "false")
    monkeypatch.setenv("EBAY_APP_ID_PRODUCTION", "env-app")
    monkeypatch.setenv("EBAY_CERT_ID_PRODUCTION", "env-cert")
    monkeypatch.setenv("EBAY_OAUTH_TOKEN", "env-token")

    config = EbayConfig.from_settings(EbaySettings(_env_file=None))

    assert config.sandbox is False
    assert config.app_id == "env-app"
    assert config.cert_id == "env-cert"
    assert config.oauth_token == "env-token"


def test_from_settings_with_missing_credentials_fails_on_store(monkeypatch):
    for name in ("EBAY_APP_ID_SANDBOX", "EBAY_CERT_ID_SANDBOX"):
        monkeypatch.delenv(name, raising=False)
    config = EbayConfig.from_settings(EbaySettings(_env_file=None, ebay_sandbox=True))
    with pytest.raises(MissingCredentialError):
        CredentialStore(config)
