import pytest

from pgconfappender.errors import ConfAppenderError
from pgconfappender.services.config_loader import ConfigLoader


def test_config_loader_loads_yaml_mapping(tmp_path):
    config_file = tmp_path / ".pgconfappend.yml"
    config_file.write_text(
        "version: '14'\npath_template: /tmp/{version}.conf\nverbose: true\n",
        encoding="utf-8",
    )

    loaded = ConfigLoader().load(str(config_file))

    assert loaded["version"] == "14"
    assert loaded["path_template"] == "/tmp/{version}.conf"
    assert loaded["verbose"] is True


def test_config_loader_returns_empty_for_no_path_or_empty_file(tmp_path):
    config_file = tmp_path / "empty.yml"
    config_file.write_text("", encoding="utf-8")

    loader = ConfigLoader()

    assert loader.load(None) == {}
    assert loader.load(str(config_file)) == {}


def test_config_loader_rejects_unknown_keys(tmp_path):
    config_file = tmp_path / ".pgconfappend.yml"
    config_file.write_text("unknown_key: true\n", encoding="utf-8")

    with pytest.raises(ConfAppenderError, match="Unknown configuration keys"):
        ConfigLoader().load(str(config_file))


def test_config_loader_rejects_non_mapping_root(tmp_path):
    config_file = tmp_path / ".pgconfappend.yml"
    config_file.write_text("- 14\n- 15\n", encoding="utf-8")

    with pytest.raises(ConfAppenderError, match="YAML mapping"):
        ConfigLoader().load(str(config_file))


def test_config_loader_reports_missing_file(tmp_path):
    with pytest.raises(ConfAppenderError, match="Config file not found"):
        ConfigLoader().load(str(tmp_path / "missing.yml"))


def test_config_loader_treats_empty_values_as_unset(tmp_path):
    config_file = tmp_path / ".pgconfappend.yml"
    config_file.write_text("version: '14'\npath_template:\nlog_file:\n", encoding="utf-8")

    loaded = ConfigLoader().load(str(config_file))

    assert loaded == {"version": "14"}


def test_config_loader_converts_numeric_version_to_string(tmp_path):
    config_file = tmp_path / ".pgconfappend.yml"
    config_file.write_text("version: 9.6\n", encoding="utf-8")

    assert ConfigLoader().load(str(config_file))["version"] == "9.6"


@pytest.mark.parametrize(
    "content, message",
    [
        ("path_template: /etc/postgresql/main/postgresql.conf\n", "placeholder"),
        ("path_template: ''\n", "non-empty string"),
        ("path_template: [a, b]\n", "non-empty string"),
        ("version: [14]\n", "version must be a string or number"),
        ("version: true\n", "version must be a string or number"),
        ("dry_run: 'false'\n", "dry_run must be true or false"),
        ("verbose: 1\n", "verbose must be true or false"),
        ("manifest_file: 3\n", "manifest_file must be a non-empty path"),
    ],
)
def test_config_loader_rejects_invalid_values(tmp_path, content, message):
    config_file = tmp_path / ".pgconfappend.yml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(ConfAppenderError, match=message) as exc_info:
        ConfigLoader().load(str(config_file))

    assert "Suggested action:" in str(exc_info.value)


def test_config_loader_errors_carry_suggested_action(tmp_path):
    config_file = tmp_path / ".pgconfappend.yml"
    config_file.write_text("- 14\n", encoding="utf-8")

    with pytest.raises(ConfAppenderError, match="Suggested action:"):
        ConfigLoader().load(str(config_file))
