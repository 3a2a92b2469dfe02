from listbird.config import load_config


def test_local_config_overrides_global(tmp_path):
    global_path = tmp_path / "config.json5"
    local_path = tmp_path / ".listbirdrc.json5"
    global_path.write_text("{timeoutMs: 5000, chromeProfile: 'Default', queryIds: {CombinedLists: 'ABC', bad: 1}}")
    local_path.write_text("// local\n{timeoutMs: 9000,}")

    config = load_config(lambda message: None, global_path=global_path, local_path=local_path)

    assert config.timeoutMs == 9000
    assert config.chromeProfile == "Default"
    assert config.queryIds == {"CombinedLists": "ABC"}


def test_unparseable_config_warns(tmp_path):
    path = tmp_path / "config.json5"
    path.write_text("{not json")
    warnings: list[str] = []

    config = load_config(warnings.append, global_path=path, local_path=tmp_path / "missing.json5")

    assert config.timeoutMs is None
    assert len(warnings) == 1
    assert str(path) in warnings[0]
