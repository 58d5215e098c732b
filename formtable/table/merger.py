# -*- coding: utf-8 -*-
"""
테이블 셀 병합 모듈

선택된 일반 셀들을 하나의 병합 셀로 합칩니다.

처리 순서:
1. 선택 영역 검증 (2개 이상, 병합 셀 없음, 사각형을 빈틈없이 채움)
2. rowspan/colspan 계산
3. 병합 기준 셀 = 행 우선 순서의 첫 셀 (row_index, col_index 최소)
4. 선택 셀들의 내용을 행 우선 순서로 이어붙여 기준 셀에 설정
5. 나머지 셀은 숨김 + 빈 내용
6. 인덱스 재계산
"""

from dataclasses import replace
from typing import Iterable, Optional, Union

from ..config import get_logger
from ..errors import InvalidSelection
from .content import ContentEngine, resolve_engine
from .models import EditResult, GridSnapshot, SelectedCell
from .reconciler import reconcile_indices
from .selection import selection_from_ids


logger = get_logger('merger')


def can_merge(grid: GridSnapshot, selection: Iterable[Union[str, SelectedCell]]) -> bool:
    """병합 가능 여부 (선택 셀 2개 이상, 모두 1x1)"""
    try:
        _validate_merge(grid, selection)
    except InvalidSelection:
        return False
    return True


def _validate_merge(grid: GridSnapshot, selection):
    """병합 조건 검증 후 (선택 셀, 경계) 반환"""
    selected = selection_from_ids(grid, selection)

    if len(selected) < 2:
        raise InvalidSelection("병합하려면 2개 이상의 셀을 선택해야 합니다")

    cells = [grid.get_cell(v.id) for v in selected]

    if any(cell.hidden for cell in cells):
        raise InvalidSelection("숨김 셀은 병합할 수 없습니다")

    if any(cell.is_merged for cell in cells):
        raise InvalidSelection("병합할 수 없습니다 - 선택 영역에 이미 병합된 셀이 있습니다 (먼저 분할하세요)")

    min_row = min(cell.row_index for cell in cells)
    min_col = min(cell.col_index for cell in cells)
    max_row = max(cell.row_index for cell in cells)
    max_col = max(cell.col_index for cell in cells)

    # 선택 셀이 경계 사각형을 빈틈없이 채워야 함
    positions = {(cell.row_index, cell.col_index) for cell in cells}
    for r in range(min_row, max_row + 1):
        for c in range(min_col, max_col + 1):
            if (r, c) not in positions:
                raise InvalidSelection(
                    f"선택 영역이 사각형이 아닙니다: ({r}, {c}) 위치가 선택되지 않았습니다"
                )

    return cells, (min_row, min_col, max_row, max_col)


def merge_cells(
    grid: GridSnapshot,
    selection: Iterable[Union[str, SelectedCell]],
    engine: Optional[ContentEngine] = None,
) -> EditResult:
    """
    선택된 셀 병합

    Args:
        grid: 현재 스냅샷
        selection: 선택 셀 id (또는 SelectedCell) 목록
        engine: 중첩 문서 엔진 (None이면 기본 엔진)

    Returns:
        EditResult: 새 스냅샷 + 병합 기준 셀만 선택된 영역

    Raises:
        InvalidSelection: 병합 조건을 만족하지 않는 경우
    """
    engine = resolve_engine(engine)
    cells, (min_row, min_col, max_row, max_col) = _validate_merge(grid, selection)

    row_span = max_row - min_row + 1
    col_span = max_col - min_col + 1

    # 행 우선 순서 (row_index, col_index)
    ordered = sorted(cells, key=lambda v: (v.row_index, v.col_index))
    anchor = ordered[0]

    # 내용 이어붙이기 (새 핸들, 원본 핸들은 변경하지 않음)
    merged_content = engine.concat_content([cell.content for cell in ordered])

    updates = {
        anchor.id: replace(
            anchor,
            row_span=row_span,
            col_span=col_span,
            content=merged_content,
        )
    }
    for cell in ordered[1:]:
        updates[cell.id] = replace(
            cell,
            hidden=True,
            content=engine.create_empty_content(),
        )

    result = reconcile_indices(grid.replace_cells(updates))
    new_anchor = result.get_cell(anchor.id)

    logger.debug(
        f"셀 병합: {anchor.id} ({min_row}, {min_col}) {row_span}x{col_span}, "
        f"숨김 {len(ordered) - 1}개"
    )
    return EditResult(grid=result, selection=(SelectedCell.from_cell(new_anchor),))
