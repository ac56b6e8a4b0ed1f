from pathlib import Path

import pytest

from delete_rest.config import ConfigManager
from delete_rest.config import manager as config_manager
from delete_rest.utils.error_handler import ErrorHandler
from delete_rest.utils.errors import ConfigError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_config_load_defaults() -> None:
    config = ConfigManager()
    filter_config = config.filter_config()

    assert config.get("default_destination") == "selected"
    assert config.get("keepfile_name") == "keep.txt"
    assert config.get("retry.max_retries") == 0
    assert filter_config.name == "default_all"
    assert filter_config.extensions == frozenset()
    assert len(filter_config.formats) == 1


def test_config_load_yaml(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "cfg.yaml",
        "name: test_cfg\nextensions: [TXT, .csv]\nformats:\n  - 'data_(\\d+)\\.\\w+'\n",
    )

    filter_config = ConfigManager(path).filter_config()

    assert filter_config.name == "test_cfg"
    assert filter_config.extensions == frozenset({"txt", "csv"})
    assert [pattern.pattern for pattern in filter_config.formats] == [r"data_(\d+)\.\w+"]


def test_user_config_replaces_filter_but_merges_settings(tmp_path: Path) -> None:
    path = _write(tmp_path / "cfg.yaml", "formats: ['(\\d+)\\.jpg']\nretry:\n  max_retries: 2\n")

    config = ConfigManager(path)

    assert config.get("name") is None
    assert config.get("extensions") is None
    assert config.get("retry.max_retries") == 2
    assert config.get("retry.backoff_cap_sec") == 5.0


@pytest.mark.parametrize(
    "text",
    [
        "formats: ['IMG_\\d+']\n",
        "formats: ['(IMG)_(\\d+)']\n",
        "formats: ['IMG_(\\d+']\n",
        "formats: 'IMG_(\\d+)'\n",
        "formats: ['(\\d+)']\nextensions: jpg\n",
        "formats: ['(\\d+)']\nretry:\n  max_retries: -1\n",
    ],
)
def test_config_validation_errors(tmp_path: Path, text: str) -> None:
    path = _write(tmp_path / "bad.yaml", text)

    with pytest.raises(ConfigError):
        ConfigManager(path)


def test_config_missing_formats(tmp_path: Path) -> None:
    path = _write(tmp_path / "cfg.yaml", "name: x\nextensions: [jpg]\n")

    with pytest.raises(ConfigError) as excinfo:
        ConfigManager(path)

    assert "formats" in str(excinfo.value)


def test_config_unreadable_and_malformed(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ConfigManager(tmp_path / "missing.yaml")
    with pytest.raises(ConfigError):
        ConfigManager(_write(tmp_path / "broken.yaml", "formats: [\n"))
    with pytest.raises(ConfigError):
        ConfigManager(_write(tmp_path / "list.yaml", "- a\n- b\n"))


def test_runtime_override_is_validated() -> None:
    config = ConfigManager()
    config.set("formats", ["no_group"])

    assert config.validate_config()
    with pytest.raises(ConfigError):
        config.filter_config()


def test_discover_prefers_explicit_path(tmp_path: Path) -> None:
    _write(tmp_path / "config.yaml", "name: local\nformats: ['(\\d+)']\n")
    explicit = _write(tmp_path / "explicit.yaml", "name: explicit\nformats: ['(\\d+)']\n")

    config = ConfigManager.discover(tmp_path, explicit)

    assert config.get("name") == "explicit"
    assert config.source == explicit


def test_discover_explicit_path_must_load(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ConfigManager.discover(tmp_path, tmp_path / "missing.yaml")


def test_discover_uses_source_directory(tmp_path: Path) -> None:
    _write(tmp_path / "config.yaml", "name: local\nformats: ['(\\d+)']\n")

    config = ConfigManager.discover(tmp_path)

    assert config.get("name") == "local"


def test_discover_falls_back_to_executable_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "source"
    install = tmp_path / "install" / "bin"
    source.mkdir()
    install.mkdir(parents=True)
    _write(tmp_path / "install" / "config.yaml", "name: parent\nformats: ['(\\d+)']\n")
    monkeypatch.setattr(config_manager, "executable_dir", lambda: install)

    assert ConfigManager.discover(source).get("name") == "parent"

    _write(install / "config.yaml", "name: adjacent\nformats: ['(\\d+)']\n")
    assert ConfigManager.discover(source).get("name") == "adjacent"


def test_discover_skips_broken_file_and_uses_builtin(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path / "config.yaml", "formats: ['no_group']\n")
    monkeypatch.setattr(config_manager, "executable_dir", lambda: None)

    errors = ErrorHandler()

    config = ConfigManager.discover(tmp_path, error_handler=errors)

    assert config.source is None
    assert config.get("name") == "default_all"
    assert [error.code for error in errors.errors] == ["W-CONFIG"]
    assert errors.errors[0].file_path == str(tmp_path / "config.yaml")


def test_describe_lists_formats_and_extensions(tmp_path: Path) -> None:
    path = _write(tmp_path / "cfg.yaml", "name: cam\nextensions: [jpg]\nformats: ['IMG_(\\d+)\\.jpg']\n")

    text = ConfigManager(path).filter_config().describe()

    assert "Name: 'cam'" in text
    assert "'jpg'" in text
    assert 'IMG_(\\d+)\\.jpg' in text
