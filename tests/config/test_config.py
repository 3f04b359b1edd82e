import logging

import pytest

from ops_bridge.config.core import Core
from ops_bridge.config.loader import load_raw_config
from ops_bridge.config.roles import Roles


def test_core_reads_environment(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    core = Core()
    assert core.DISCORD_TOKEN == "test-token"
    assert core.GUILD_ID == 100
    assert core.CLIENT_ID == 1
    assert core.PORT == 10000


@pytest.mark.parametrize("name", ["DISCORD_TOKEN", "CLIENT_ID", "GUILD_ID", "OPS_SHARED_SECRET"])
def test_core_missing_required_value_is_fatal(monkeypatch, name):
    monkeypatch.delenv(name, raising=False)
    with pytest.raises(ValueError, match=name):
        Core()


def test_core_rejects_non_numeric_guild(monkeypatch):
    monkeypatch.setenv("GUILD_ID", "glace")
    with pytest.raises(ValueError, match="GUILD_ID"):
        Core()


def test_core_toml_overrides_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    core = Core({"opsbridge": {"api": {"port": 9000}, "discord": {"guild_id": 555}}})
    assert core.PORT == 9000
    assert core.GUILD_ID == 555


def test_roles_parse_comma_separated_env(monkeypatch):
    monkeypatch.setenv("TIER6_ROLE_IDS", " 10, 11 ,,")
    monkeypatch.setenv("TIER1_ROLE_IDS", "20")
    monkeypatch.setenv("ALLOWED_POSTER_ROLE_IDS", "30,31")
    roles = Roles()
    assert roles.TIERS.role_ids_for(6) == frozenset({"10", "11"})
    assert roles.TIERS.role_ids_for(1) == frozenset({"20"})
    assert roles.TIERS.role_ids_for(3) == frozenset()
    assert roles.ALLOWED_POSTER_ROLE_IDS == frozenset({"30", "31"})


def test_roles_accept_toml_arrays():
    roles = Roles({"opsbridge": {"roles": {"tier2": [1, 2], "allowed_posters": [9]}}})
    assert roles.TIERS.role_ids_for(2) == frozenset({"1", "2"})
    assert roles.ALLOWED_POSTER_ROLE_IDS == frozenset({"9"})


def test_roles_warn_on_overlap(monkeypatch, caplog):
    monkeypatch.setenv("TIER2_ROLE_IDS", "7")
    monkeypatch.setenv("TIER4_ROLE_IDS", "7")
    with caplog.at_level(logging.WARNING, logger="ops_bridge.config.roles"):
        Roles()
    assert any("multiple tiers" in rec.getMessage() for rec in caplog.records)


def test_load_raw_config_missing_file(tmp_path):
    assert load_raw_config(tmp_path / "absent.toml") == {}


def test_load_raw_config_reads_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[opsbridge.api]\nport = 1234\n', encoding="utf-8")
    assert load_raw_config(path) == {"opsbridge": {"api": {"port": 1234}}}


def test_load_raw_config_env_path(monkeypatch, tmp_path):
    path = tmp_path / "bridge.toml"
    path.write_text('[opsbridge.roles]\ntier6 = ["1"]\n', encoding="utf-8")
    monkeypatch.setenv("OPS_BRIDGE_CONFIG", str(path))
    assert load_raw_config() == {"opsbridge": {"roles": {"tier6": ["1"]}}}


def test_load_raw_config_drops_unknown_sections(tmp_path, caplog):
    path = tmp_path / "config.toml"
    path.write_text(
        '[other]\nx = 1\n[opsbridge.api]\nport = 1\n[opsbridge.metrics]\nenabled = true\n',
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="ops_bridge.config.loader"):
        assert load_raw_config(path) == {"opsbridge": {"api": {"port": 1}}}
    assert any("opsbridge.metrics" in rec.getMessage() for rec in caplog.records)


def test_load_raw_config_without_bridge_table(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[unrelated]\nx = 1\n', encoding="utf-8")
    assert load_raw_config(path) == {}
