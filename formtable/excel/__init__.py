# -*- coding: utf-8 -*-
"""
excel 모듈 - 폼 테이블 → Excel 변환

그리드 스냅샷을 Excel 워크시트로 내보내기 (병합 영역, 열 너비, 테두리, 배경색)
"""

from .grid_to_excel import (
    GridToExcel,
    convert_grid_to_excel,
)
from .styles import ExcelStyler

__all__ = [
    'GridToExcel',
    'convert_grid_to_excel',
    'ExcelStyler',
]
