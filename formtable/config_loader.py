# -*- coding: utf-8 -*-
"""
테이블 설정 로더

table_config.yaml 파일을 로드하여 테이블 기본값과 Excel 내보내기 설정을 관리합니다.

YAML 구조:
    table:
      default_cell_width: 200
      min_cell_width: 50
      max_expand_iterations: 10000
      strict_invariants: false
    excel:
      sheet_title: FormTable
      px_per_char: 7
      row_height_pt: 20
      border_style: thin
      border_color: "000000"
"""

import yaml
from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from pathlib import Path

from .config import (
    DEFAULT_CELL_WIDTH,
    MIN_CELL_WIDTH,
    MAX_EXPAND_ITERATIONS,
    get_config_path,
)


@dataclass
class ExcelExportConfig:
    """Excel 내보내기 설정 (GridToExcel 옵션)"""
    sheet_title: str = "FormTable"

    # 열 너비 변환 (px -> 문자)
    px_per_char: float = 7

    # 행 높이 (pt)
    row_height_pt: float = 20

    # 테두리: thin, medium, dashed, dotted, double ...
    border_style: str = "thin"
    border_color: str = "000000"


@dataclass
class TableConfig:
    """테이블 통합 설정"""
    default_cell_width: int = DEFAULT_CELL_WIDTH
    min_cell_width: int = MIN_CELL_WIDTH
    max_expand_iterations: int = MAX_EXPAND_ITERATIONS

    # True면 명령 실행 후 전체 불변 조건 검사
    strict_invariants: bool = False

    excel: ExcelExportConfig = field(default_factory=ExcelExportConfig)


class TableConfigLoader:
    """YAML 설정 로더"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else get_config_path()
        self._config: Optional[TableConfig] = None

    def load(self, config_path: Optional[str] = None) -> TableConfig:
        """YAML 설정 파일 로드 (파일이 없으면 기본값)"""
        path = Path(config_path) if config_path else self.config_path

        if path and path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            self._config = self._parse_config(data)
        else:
            self._config = TableConfig()

        return self._config

    def load_from_string(self, yaml_string: str) -> TableConfig:
        """YAML 문자열에서 설정 로드"""
        data = yaml.safe_load(yaml_string) or {}
        self._config = self._parse_config(data)
        return self._config

    def load_from_dict(self, data: Dict[str, Any]) -> TableConfig:
        """딕셔너리에서 설정 로드"""
        self._config = self._parse_config(data)
        return self._config

    def _parse_config(self, data: Dict[str, Any]) -> TableConfig:
        """설정 데이터 파싱"""
        table_data = data.get('table', {}) or {}
        excel_data = data.get('excel', {}) or {}

        config = TableConfig(
            default_cell_width=int(table_data.get('default_cell_width', DEFAULT_CELL_WIDTH)),
            min_cell_width=int(table_data.get('min_cell_width', MIN_CELL_WIDTH)),
            max_expand_iterations=int(table_data.get('max_expand_iterations', MAX_EXPAND_ITERATIONS)),
            strict_invariants=bool(table_data.get('strict_invariants', False)),
            excel=self._parse_excel_config(excel_data),
        )

        # 최소 너비가 기본 너비보다 클 수 없음
        if config.min_cell_width > config.default_cell_width:
            config.min_cell_width = config.default_cell_width

        return config

    def _parse_excel_config(self, data: Dict[str, Any]) -> ExcelExportConfig:
        """Excel 설정 파싱"""
        defaults = ExcelExportConfig()
        return ExcelExportConfig(
            sheet_title=str(data.get('sheet_title', defaults.sheet_title)),
            px_per_char=float(data.get('px_per_char', defaults.px_per_char)),
            row_height_pt=float(data.get('row_height_pt', defaults.row_height_pt)),
            border_style=str(data.get('border_style', defaults.border_style)),
            border_color=str(data.get('border_color', defaults.border_color)).lstrip('#').upper(),
        )

    @property
    def config(self) -> TableConfig:
        """현재 로드된 설정"""
        if self._config is None:
            self.load()
        return self._config


# 편의 함수
def load_table_config(config_path: Optional[str] = None) -> TableConfig:
    """테이블 설정 로드"""
    loader = TableConfigLoader(config_path)
    return loader.load()
