from rkeconf.authentication import (
    AuthnConfig,
    expand_authentication,
    flatten_authentication,
)


def _conf():
    return AuthnConfig(sans=["sans1", "sans2"], strategy="strategy")


def _schema():
    return [{"sans": ["sans1", "sans2"], "strategy": "strategy"}]


def test_flatten_authentication():
    assert flatten_authentication(_conf()) == _schema()


def test_expand_authentication():
    assert expand_authentication(_schema()) == _conf()


def test_flatten_empty_config_gives_empty_map():
    assert flatten_authentication(AuthnConfig()) == [{}]


def test_expand_empty_input_gives_default():
    assert expand_authentication([]) == AuthnConfig()
    assert expand_authentication([None]) == AuthnConfig()


def test_expand_ignores_empty_values():
    result = expand_authentication([{"sans": [], "strategy": ""}])
    assert result == AuthnConfig()


def test_flatten_copies_sans():
    conf = _conf()
    out = flatten_authentication(conf)
    out[0]["sans"].append("other")
    assert conf.sans == ["sans1", "sans2"]