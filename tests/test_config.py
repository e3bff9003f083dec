from pathlib import Path

import pytest

from repetition_scanner.config import (
    ScannerConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_defaults():
    cfg = load_config()

    assert cfg.window_size == 100
    assert cfg.min_occurrence == 2
    assert cfg.min_word_length == 4
    assert cfg.scan_partial_windows is False
    assert cfg.to_dict()["ignore_presets"] == []


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict(
        {"window_size": 50, "ignore_presets": "latex", "unknown": True}
    )

    assert cfg.window_size == 50
    assert cfg.ignore_presets == ["latex"]


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "window_size: 20\nmin_occurrence: 3\nignore_patterns:\n  - '\\[.*?\\]'\n",
        encoding="utf-8",
    )
    cfg = config_from_yaml(path)

    assert cfg.window_size == 20
    assert cfg.min_occurrence == 3
    assert cfg.ignore_patterns == ["\\[.*?\\]"]


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError):
        config_from_yaml(path)


@pytest.mark.parametrize(
    "field_name", ["window_size", "min_occurrence", "min_word_length"]
)
def test_validate_rejects_non_positive_values(field_name: str):
    cfg = ScannerConfig(**{field_name: 0})

    with pytest.raises(ValueError):
        cfg.validate()
