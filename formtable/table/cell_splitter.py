# -*- coding: utf-8 -*-
"""
병합 셀 분할 모듈

병합 셀의 rowspan/colspan을 1로 되돌리고 숨겨진 셀을 다시 표시합니다.

주의:
- 병합 시 숨김 셀의 원래 내용은 이미 삭제되었으므로 되돌리지 않습니다.
- 다시 표시되는 셀은 빈 내용으로 시작합니다.
- 병합 기준 셀의 내용은 그대로 유지됩니다.
"""

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Union

from ..config import get_logger
from ..errors import InvalidSelection
from .content import ContentEngine, resolve_engine
from .models import CellData, EditResult, GridSnapshot, SelectedCell
from .reconciler import reconcile_indices
from .selection import selection_from_ids


logger = get_logger('cell_splitter')


def _merged_cells_in(grid: GridSnapshot, selection) -> List[CellData]:
    """선택 영역 안의 병합 셀 (rowspan + colspan > 2)"""
    selected = selection_from_ids(grid, selection)
    cells = [grid.get_cell(v.id) for v in selected]
    return [cell for cell in cells if not cell.hidden and cell.is_merged]


def can_split(grid: GridSnapshot, selection: Iterable[Union[str, SelectedCell]]) -> bool:
    """분할 가능 여부 (병합 셀이 하나 이상 포함)"""
    try:
        return bool(_merged_cells_in(grid, selection))
    except InvalidSelection:
        return False


def split_cells(
    grid: GridSnapshot,
    selection: Iterable[Union[str, SelectedCell]],
    engine: Optional[ContentEngine] = None,
) -> EditResult:
    """
    선택 영역 안의 병합 셀 분할

    Args:
        grid: 현재 스냅샷
        selection: 선택 셀 id (또는 SelectedCell) 목록
        engine: 중첩 문서 엔진 (None이면 기본 엔진)

    Returns:
        EditResult: 새 스냅샷 + (기존 선택 셀 + 다시 표시된 셀)

    Raises:
        InvalidSelection: 선택 영역에 병합 셀이 없는 경우
    """
    engine = resolve_engine(engine)
    selection = list(selection)
    merged = _merged_cells_in(grid, selection)

    if not merged:
        raise InvalidSelection("분할할 병합 셀이 선택 영역에 없습니다")

    updates: Dict[str, CellData] = {}
    revealed: List[CellData] = []

    for anchor in merged:
        # 병합 영역 안의 숨김 셀 다시 표시
        for cell in grid.hidden_cells_in(anchor):
            if cell.id in updates:
                continue
            updates[cell.id] = replace(
                cell,
                hidden=False,
                row_span=1,
                col_span=1,
                content=engine.create_empty_content(),
            )
            revealed.append(cell)

        updates[anchor.id] = replace(anchor, row_span=1, col_span=1)

    result = reconcile_indices(grid.replace_cells(updates))

    # 분할 후 선택 영역 = 기존 선택 + 다시 표시된 셀
    next_ids = [v.id if isinstance(v, SelectedCell) else v for v in selection]
    next_ids.extend(cell.id for cell in revealed)
    next_selection = selection_from_ids(result, next_ids)

    logger.debug(f"셀 분할: 병합 셀 {len(merged)}개, 다시 표시 {len(revealed)}개")
    return EditResult(grid=result, selection=next_selection)
