# -*- coding: utf-8 -*-
"""
formtable 패키지

리치 텍스트 편집기의 폼 테이블용 병합 셀 그리드 엔진

모듈:
- table: 그리드 모델 및 구조 편집 (병합, 분할, 행/열 삽입/삭제)
- excel: 그리드 → Excel 내보내기
- core: 공통 유틸리티 (단위 변환, ID 생성)
"""

from .config import (
    PROJECT_ROOT,
    PACKAGE_DIR,
    TABLE_MODULE_DIR,
    EXCEL_MODULE_DIR,
    CORE_MODULE_DIR,
    DEFAULT_CELL_WIDTH,
    MIN_CELL_WIDTH,
    setup_logging,
)
from .errors import (
    FormTableError,
    InvalidSelection,
    OutOfRangeEdit,
    InvariantViolation,
)
from .config_loader import TableConfig, ExcelExportConfig, load_table_config

__version__ = '0.1.0'

__all__ = [
    'PROJECT_ROOT',
    'PACKAGE_DIR',
    'TABLE_MODULE_DIR',
    'EXCEL_MODULE_DIR',
    'CORE_MODULE_DIR',
    'DEFAULT_CELL_WIDTH',
    'MIN_CELL_WIDTH',
    'setup_logging',
    'FormTableError',
    'InvalidSelection',
    'OutOfRangeEdit',
    'InvariantViolation',
    'TableConfig',
    'ExcelExportConfig',
    'load_table_config',
]
