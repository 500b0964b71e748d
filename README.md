# introspection-sdk

Configuration types for clients of the Introspection REST API.

Everything lives in the `introspection_sdk.types` module:

- `AdvancedOptions`: a dataclass with `base_api_url`, `additional_headers` and `debug`. The first two default to `None` and `debug` defaults to `False`.
- `ClientConfig`: a dataclass with `token`, `service_name`, `project_id` (a `uuid.UUID`) and `advanced` (an `AdvancedOptions`). Every field defaults to `None`.
- `ClientConfigBuilder`: a fluent builder that produces a `ClientConfig`.
- The constants `DEFAULT_SERVICE_NAME` (`"introspection-client"`), `DEFAULT_BASE_API_URL` (`"https://api.introspection.dev"`) and `DEFAULT_API_TIMEOUT_SECS` (`30`).

## Installation

```
pip install introspection-sdk
```

## Usage

Build a configuration step by step:

```python
from introspection_sdk.types import ClientConfig

config = (
    ClientConfig.builder()
    .token("token")
    .service_name("my-service")
    .project_id("00000000-0000-0000-0000-000000000001")
    .build()
)
assert config.token == "token"
assert config.service_name == "my-service"
```

`project_id` on the builder accepts either a `uuid.UUID` or its string form. A string that is not a valid UUID raises `ValueError`. A value of any other type raises `TypeError`. A field you leave unset on the builder stays `None` in the built configuration.

To make a configuration that holds only a token:

```python
config = ClientConfig.with_token("token")
```

To attach advanced options, use `with_advanced`. It returns a new `ClientConfig` and leaves the original unchanged:

```python
from introspection_sdk.types import AdvancedOptions, ClientConfig

base = ClientConfig.with_token("token")
config = base.with_advanced(
    AdvancedOptions(
        base_api_url="http://localhost:8080",
        additional_headers={"X-Custom-Header": "value"},
    )
)
assert base.advanced is None
```

## What this package does not do

The package only holds configuration values. It does not:

- make HTTP requests or provide an API client;
- read environment variables;
- fill in unset fields from the `DEFAULT_*` constants.

The constants are provided so that code which consumes a `ClientConfig` can apply them.

## Running the tests

```
pip install -e ".[test]"
pytest
```