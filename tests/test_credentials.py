import pytest

from revolut.business import BusinessAuthenticationBuilder
from revolut.errors import ClientBuilderError, IncompleteBuilder, MissingEnvironmentVariable
from revolut.merchant import MerchantAuthenticationBuilder


def test_refresh_token_path_leaves_authorization_code_absent():
    auth = (
        BusinessAuthenticationBuilder()
        .with_refresh_token("r1")
        .with_client_assertion("jwt")
        .build()
    )
    assert auth.client_assertion == "jwt"
    assert auth.refresh_token == "r1"
    assert auth.authorization_code is None


def test_authorization_code_path_leaves_refresh_token_absent():
    auth = (
        BusinessAuthenticationBuilder()
        .with_client_assertion("jwt")
        .with_authorization_code("oa_code")
        .build()
    )
    assert auth.authorization_code == "oa_code"
    assert auth.refresh_token is None


def test_setting_a_slot_twice_replaces_it():
    auth = (
        BusinessAuthenticationBuilder()
        .with_client_assertion("old")
        .with_client_assertion("new")
        .with_refresh_token("r1")
        .build()
    )
    assert auth.client_assertion == "new"


def test_missing_client_assertion():
    with pytest.raises(IncompleteBuilder):
        BusinessAuthenticationBuilder().with_refresh_token("r1").build()


def test_grant_is_required():
    with pytest.raises(IncompleteBuilder):
        BusinessAuthenticationBuilder().with_client_assertion("jwt").build()


def test_both_grants_are_rejected():
    builder = (
        BusinessAuthenticationBuilder()
        .with_client_assertion("jwt")
        .with_refresh_token("r1")
        .with_authorization_code("oa_code")
    )
    with pytest.raises(IncompleteBuilder):
        builder.build()


def test_environment_inherited_defaults(monkeypatch):
    monkeypatch.setenv("REVOLUT_CLIENT_ASSERTION", "env-jwt")
    monkeypatch.setenv("REVOLUT_REFRESH_TOKEN", "env-refresh")
    auth = (
        BusinessAuthenticationBuilder()
        .with_environment_inherited_client_assertion()
        .with_environment_inherited_refresh_token()
        .build()
    )
    assert (auth.client_assertion, auth.refresh_token) == ("env-jwt", "env-refresh")


def test_environment_inherited_custom_name(monkeypatch):
    monkeypatch.setenv("MY_CODE", "oa_from_env")
    auth = (
        BusinessAuthenticationBuilder()
        .with_client_assertion("jwt")
        .with_environment_inherited_authorization_code("MY_CODE")
        .build()
    )
    assert auth.authorization_code == "oa_from_env"


def test_missing_environment_variable_keeps_builder_untouched(monkeypatch):
    monkeypatch.delenv("UNSET_VAR_NAME", raising=False)
    builder = BusinessAuthenticationBuilder().with_client_assertion("jwt")

    with pytest.raises(MissingEnvironmentVariable) as excinfo:
        builder.with_environment_inherited_refresh_token("UNSET_VAR_NAME")

    assert excinfo.value.variable == "UNSET_VAR_NAME"
    assert isinstance(excinfo.value, ClientBuilderError)
    assert builder.refresh_token is None
    assert builder.client_assertion == "jwt"


def test_secrets_stay_out_of_repr():
    auth = (
        BusinessAuthenticationBuilder()
        .with_client_assertion("assertion-secret")
        .with_refresh_token("refresh-secret")
        .build()
    )
    assert "secret" not in repr(auth)
    assert "sk_live" not in repr(MerchantAuthenticationBuilder().with_secret_key("sk_live"))


def test_merchant_secret_key(monkeypatch):
    assert MerchantAuthenticationBuilder().with_secret_key("sk_1").build().secret_key == "sk_1"

    monkeypatch.setenv("REVOLUT_SECRET_KEY", "sk_env")
    auth = MerchantAuthenticationBuilder().with_environment_inherited_secret_key().build()
    assert auth.secret_key == "sk_env"


def test_merchant_secret_key_required(monkeypatch):
    with pytest.raises(IncompleteBuilder):
        MerchantAuthenticationBuilder().build()

    monkeypatch.delenv("NO_SUCH_KEY", raising=False)
    with pytest.raises(MissingEnvironmentVariable):
        MerchantAuthenticationBuilder().with_environment_inherited_secret_key("NO_SUCH_KEY")
