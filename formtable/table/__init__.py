# -*- coding: utf-8 -*-
"""
table 모듈 - 병합 셀 그리드 엔진

불변 스냅샷 모델과 구조 편집 연산 (병합, 분할, 행/열 삽입/삭제, 선택 영역 확장)
"""

from .models import (
    BORDER_DIRECTIONS,
    CellBorder,
    CellData,
    SelectedCell,
    ColHeader,
    RowItem,
    GridSnapshot,
    EditResult,
)
from .content import (
    ContentEngine,
    DocumentContentEngine,
    NestedDocument,
)
from .factory import create_grid
from .reconciler import reconcile_indices, check_invariants
from .selection import (
    expand_selection,
    expand_in_grid,
    select_range,
    selection_from_ids,
)
from .merger import can_merge, merge_cells
from .cell_splitter import can_split, split_cells
from .row_builder import insert_row, insert_column
from .row_remover import remove_row, remove_column, remove_columns
from .styler import set_cell_style, set_cell_borders, set_column_width
from .serializer import export_snapshot, import_snapshot, dumps, loads
from .inspect import format_grid_structure, print_grid_structure
from .commands import (
    CommandType,
    TableCommand,
    CommandResult,
    FormTableEditor,
    can_insert,
    can_remove,
    can_set_style,
)

__all__ = [
    'BORDER_DIRECTIONS',
    'CellBorder',
    'CellData',
    'SelectedCell',
    'ColHeader',
    'RowItem',
    'GridSnapshot',
    'EditResult',
    'ContentEngine',
    'DocumentContentEngine',
    'NestedDocument',
    'create_grid',
    'reconcile_indices',
    'check_invariants',
    'expand_selection',
    'expand_in_grid',
    'select_range',
    'selection_from_ids',
    'can_merge',
    'merge_cells',
    'can_split',
    'split_cells',
    'insert_row',
    'insert_column',
    'remove_row',
    'remove_column',
    'remove_columns',
    'set_cell_style',
    'set_cell_borders',
    'set_column_width',
    'export_snapshot',
    'import_snapshot',
    'dumps',
    'loads',
    'format_grid_structure',
    'print_grid_structure',
    'CommandType',
    'TableCommand',
    'CommandResult',
    'FormTableEditor',
    'can_insert',
    'can_remove',
    'can_set_style',
]
