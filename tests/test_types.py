import uuid

import pytest

from introspection_sdk.types import (
    AdvancedOptions,
    ClientConfig,
    ClientConfigBuilder,
)


def test_client_config_builder():
    config = ClientConfig.builder().token("token").service_name("test-service").build()
    assert config.token == "token"
    assert config.service_name == "test-service"


def test_builder_unset_fields_are_none():
    config = ClientConfig.builder().build()
    assert config == ClientConfig()
    assert config.token is None
    assert config.project_id is None
    assert config.advanced is None


def test_builder_is_class_instance():
    builder = ClientConfig.builder()
    assert isinstance(builder, ClientConfigBuilder)
    assert builder.token("token") is builder


def test_with_token_sets_only_token():
    config = ClientConfig.with_token("token")
    assert config == ClientConfig(token="token")
    assert config.service_name is None


def test_with_advanced_returns_updated_copy():
    base = ClientConfig.with_token("token")
    opts = AdvancedOptions(base_api_url="http://localhost:8080")
    updated = base.with_advanced(opts)
    assert updated.advanced == opts
    assert updated.token == "token"
    assert base.advanced is None


def test_advanced_options_defaults():
    opts = AdvancedOptions()
    assert opts.base_api_url is None
    assert opts.additional_headers is None
    assert opts.debug is False


def test_builder_with_advanced_headers():
    opts = AdvancedOptions(
        base_api_url="http://localhost:8080",
        additional_headers={"X-Custom-Header": "value"},
    )
    config = ClientConfig.builder().token("token").advanced(opts).build()
    assert config.advanced.additional_headers == {"X-Custom-Header": "value"}
    assert config.advanced.base_api_url == "http://localhost:8080"


def test_project_id_from_string():
    text = "00000000-0000-0000-0000-00000000bbbb"
    config = ClientConfig.builder().project_id(text).build()
    assert config.project_id == uuid.UUID(text)


def test_project_id_from_uuid():
    pid = uuid.UUID("00000000-0000-0000-0000-000000000001")
    config = ClientConfig.builder().project_id(pid).build()
    assert config.project_id == pid


def test_project_id_invalid_string():
    with pytest.raises(ValueError):
        ClientConfig.builder().project_id("not-a-uuid")


def test_project_id_wrong_type():
    with pytest.raises(TypeError):
        ClientConfig.builder().project_id(42)