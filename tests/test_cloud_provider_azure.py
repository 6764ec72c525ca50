import copy

import pytest

from rkeschema.cloud_provider_azure import (
    AzureCloudProvider,
    expand_azure_cloud_provider,
    flatten_azure_cloud_provider,
)

PASSWORD = "password"


def _values() -> dict:
    """Field values shared by the dataclass and its flattened form."""
    password = PASSWORD
    return dict(
        aad_client_id="XXXXXXXX",
        aad_client_secret="secret",
        subscription_id="YYYYYYYY",
        tenant_id="ZZZZZZZZ",
        aad_client_cert_password=password,
        aad_client_cert_path="/home/user/.ssh",
        cloud="cloud",
        cloud_provider_backoff=True,
        cloud_provider_backoff_duration=30,
        cloud_provider_backoff_exponent=20,
        cloud_provider_backoff_jitter=10,
        cloud_provider_backoff_retries=5,
        cloud_provider_rate_limit=True,
        cloud_provider_rate_limit_bucket=15,
        cloud_provider_rate_limit_qps=100,
        location="location",
        maximum_load_balancer_rule_count=150,
        primary_availability_set_name="primary",
        primary_scale_set_name="primary_scale",
        resource_group="resource_group",
        route_table_name="route_table_name",
        security_group_name="security_group_name",
        subnet_name="subnet_name",
        use_instance_metadata=True,
        use_managed_identity_extension=True,
        vm_type="vm_type",
        vnet_name="vnet_name",
        vnet_resource_group="vnet_resource_group",
    )


def _conf() -> AzureCloudProvider:
    return AzureCloudProvider(**_values())


def _interface() -> list:
    return [_values()]


def test_flatten_azure_matches_source_case():
    assert flatten_azure_cloud_provider(_conf(), _interface()) == _interface()


def test_expand_azure_matches_source_case():
    assert expand_azure_cloud_provider(_interface()) == _conf()


def test_flatten_none_provider_gives_empty_list():
    assert flatten_azure_cloud_provider(None, _interface()) == []


def test_flatten_empty_provider_keeps_only_bools():
    assert flatten_azure_cloud_provider(AzureCloudProvider(), []) == [
        dict(
            cloud_provider_backoff=False,
            cloud_provider_rate_limit=False,
            use_instance_metadata=False,
            use_managed_identity_extension=False,
        )
    ]


def test_flatten_keeps_state_keys_without_mutating_state():
    state = [{"extra": "kept", "location": "old"}]
    before = copy.deepcopy(state)
    out = flatten_azure_cloud_provider(AzureCloudProvider(location="new"), state)
    assert out[0]["extra"] == "kept"
    assert out[0]["location"] == "new"
    assert state == before


@pytest.mark.parametrize("items", [None, [], [None]])
def test_expand_empty_gives_default(items):
    assert expand_azure_cloud_provider(items) == AzureCloudProvider()


def test_expand_ignores_non_positive_and_wrong_types():
    provider = expand_azure_cloud_provider(
        [
            {
                "cloud_provider_backoff_retries": 0,
                "cloud_provider_rate_limit_qps": -3,
                "cloud_provider_backoff_jitter": True,
                "location": "",
                "cloud_provider_backoff": "yes",
            }
        ]
    )
    assert provider == AzureCloudProvider()


def test_round_trip():
    conf = _conf()
    assert expand_azure_cloud_provider(flatten_azure_cloud_provider(conf, None)) == conf