# -*- coding: utf-8 -*-
"""YAML 설정 로더 테스트"""

from formtable.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CELL_WIDTH,
    DEFAULT_CONFIG_PATH,
    MAX_EXPAND_ITERATIONS,
    MIN_CELL_WIDTH,
    get_config_path,
)
from formtable.config_loader import TableConfigLoader, load_table_config


def test_default_config_file():
    """패키지에 포함된 table_config.yaml = 코드 기본값"""
    assert DEFAULT_CONFIG_PATH.exists()

    config = load_table_config(str(DEFAULT_CONFIG_PATH))

    assert config.default_cell_width == DEFAULT_CELL_WIDTH
    assert config.min_cell_width == MIN_CELL_WIDTH
    assert config.max_expand_iterations == MAX_EXPAND_ITERATIONS
    assert config.strict_invariants is False
    assert config.excel.sheet_title == "FormTable"
    assert config.excel.border_color == "000000"


def test_missing_file_uses_defaults(tmp_path):
    config = load_table_config(str(tmp_path / "nothing.yaml"))

    assert config.default_cell_width == DEFAULT_CELL_WIDTH
    assert config.excel.row_height_pt == 20


def test_load_from_string():
    config = TableConfigLoader().load_from_string(
        """
table:
  default_cell_width: 120
  strict_invariants: true
excel:
  sheet_title: 신청서
  border_style: medium
  border_color: "#ff8800"
"""
    )

    assert config.default_cell_width == 120
    assert config.min_cell_width == MIN_CELL_WIDTH
    assert config.strict_invariants is True
    assert config.excel.sheet_title == "신청서"
    assert config.excel.border_style == "medium"
    assert config.excel.border_color == "FF8800"


def test_min_width_clamped_to_default():
    config = TableConfigLoader().load_from_dict(
        {'table': {'default_cell_width': 40, 'min_cell_width': 80}}
    )

    assert config.min_cell_width == 40


def test_empty_yaml():
    config = TableConfigLoader().load_from_string("")
    assert config.default_cell_width == DEFAULT_CELL_WIDTH


def test_env_var_overrides_path(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("table:\n  max_expand_iterations: 50\n", encoding='utf-8')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert get_config_path() == path
    loader = TableConfigLoader()
    assert loader.config.max_expand_iterations == 50
