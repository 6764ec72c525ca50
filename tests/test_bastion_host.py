from rkeschema.bastion_host import (
    BastionHost,
    expand_bastion_host,
    flatten_bastion_host,
)


def _conf():
    return BastionHost(
        address="bastion.terraform.test",
        ignore_proxy_env_vars=True,
        ssh_cert="XXXXXXXX",
        ssh_cert_path="/home/user/.ssh",
        port="22",
        ssh_agent_auth=True,
        ssh_key="XXXXXXXX",
        ssh_key_path="/home/user/.ssh",
        user="test",
    )


def _flat():
    return [
        {
            "address": "bastion.terraform.test",
            "ignore_proxy_env_vars": True,
            "port": "22",
            "ssh_agent_auth": True,
            "ssh_cert": "XXXXXXXX",
            "ssh_cert_path": "/home/user/.ssh",
            "ssh_key": "XXXXXXXX",
            "ssh_key_path": "/home/user/.ssh",
            "user": "test",
        }
    ]


def test_flatten():
    assert flatten_bastion_host(_conf()) == _flat()


def test_expand():
    assert expand_bastion_host(_flat()) == _conf()


def test_flatten_without_user_is_none():
    assert flatten_bastion_host(BastionHost(address="host")) is None
    assert flatten_bastion_host(BastionHost(user="u")) is None


def test_flatten_minimal_keeps_booleans():
    assert flatten_bastion_host(BastionHost(address="h", user="u")) == [
        {"address": "h", "user": "u", "ignore_proxy_env_vars": False, "ssh_agent_auth": False}
    ]


def test_expand_empty():
    assert expand_bastion_host([]) == BastionHost()