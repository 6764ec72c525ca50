from rkeschema.authentication import (
    AuthnConfig,
    expand_authentication,
    flatten_authentication,
)


def _conf():
    return AuthnConfig(sans=["sans1", "sans2"], strategy="strategy")


def _flat():
    return [{"sans": ["sans1", "sans2"], "strategy": "strategy"}]


def test_flatten():
    assert flatten_authentication(_conf()) == _flat()


def test_expand():
    assert expand_authentication(_flat()) == _conf()


def test_flatten_empty_config_gives_empty_map():
    assert flatten_authentication(AuthnConfig()) == [{}]


def test_expand_empty_and_none():
    assert expand_authentication([]) == AuthnConfig()
    assert expand_authentication([None]) == AuthnConfig()


def test_expand_ignores_wrong_types():
    assert expand_authentication([{"sans": "x", "strategy": 5}]) == AuthnConfig()