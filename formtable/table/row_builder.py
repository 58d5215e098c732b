# -*- coding: utf-8 -*-
"""
테이블 행/열 삽입 모듈

새 행(열)을 지정 위치에 삽입하고, 삽입 경계를 가로지르는 병합 셀을 확장합니다.

규칙:
- 삽입 위치 앞 줄과 뒤 줄을 모두 커버하는 병합 셀이 있으면
  해당 위치의 새 셀은 숨김 셀이 되고, 병합 셀의 rowspan(colspan)이 1 증가
- 그 외 위치의 새 셀은 빈 내용의 일반 셀
- 열 삽입 시 같은 위치에 열 헤더도 추가
"""

from dataclasses import replace
from typing import Dict, List, Optional

from ..config import DEFAULT_CELL_WIDTH, get_logger
from ..core.uid import uid
from ..errors import OutOfRangeEdit
from .content import ContentEngine, resolve_engine
from .models import CellData, ColHeader, EditResult, GridSnapshot, RowItem, SelectedCell
from .reconciler import reconcile_indices


logger = get_logger('row_builder')


DIRECTION_ALIASES = {
    'before': 'before',
    'after': 'after',
    'up': 'before',
    'down': 'after',
    'left': 'before',
    'right': 'after',
}


def normalize_direction(direction: Optional[str]) -> str:
    """삽입 방향 정규화 (before | after)"""
    if direction is None:
        return 'after'
    normalized = DIRECTION_ALIASES.get(str(direction).lower())
    if normalized is None:
        raise ValueError(f"알 수 없는 삽입 방향: {direction}")
    return normalized


def _insert_position(index: int, count: int, direction: str, label: str) -> int:
    """기준 인덱스와 방향으로 실제 삽입 위치 계산"""
    if count == 0:
        # 빈 테이블은 0번 위치에만 삽입
        if index not in (0, -1):
            raise OutOfRangeEdit(f"{label} 인덱스 {index}가 범위를 벗어났습니다. (총 0개)")
        return 0

    if not (0 <= index < count):
        raise OutOfRangeEdit(f"{label} 인덱스 {index}가 범위를 벗어났습니다. (총 {count}개)")

    return index + (1 if direction == 'after' else 0)


def _new_cell(engine: ContentEngine, row: int, col: int, hidden: bool = False) -> CellData:
    """빈 내용의 새 셀 생성"""
    return CellData(
        id=uid(),
        row_index=row,
        col_index=col,
        hidden=hidden,
        content=engine.create_empty_content(),
    )


def insert_row(
    grid: GridSnapshot,
    row_index: int,
    direction: str = 'after',
    engine: Optional[ContentEngine] = None,
    height: Optional[int] = None,
) -> EditResult:
    """
    행 삽입

    Args:
        grid: 현재 스냅샷
        row_index: 기준 행 인덱스
        direction: 'before' (위) | 'after' (아래)
        engine: 중첩 문서 엔진
        height: 새 행 높이 (px, 선택)

    Returns:
        EditResult: 새 스냅샷 + 새 행의 표시 셀

    Raises:
        OutOfRangeEdit: 기준 행이 범위를 벗어난 경우
    """
    engine = resolve_engine(engine)
    direction = normalize_direction(direction)
    position = _insert_position(row_index, grid.row_count, direction, '행')

    # 삽입 경계를 가로지르는 병합 셀 (position-1 행과 position 행을 모두 커버)
    spanning = [
        anchor for anchor in grid.anchors()
        if anchor.row_index < position <= anchor.end_row
    ]

    covered_cols: Dict[int, CellData] = {}
    for anchor in spanning:
        for c in range(anchor.col_index, anchor.end_col + 1):
            covered_cols[c] = anchor

    new_cells = [
        _new_cell(engine, position, c, hidden=c in covered_cols)
        for c in range(grid.col_count)
    ]
    new_row = RowItem(id=uid(), cells=tuple(new_cells), height=height)

    # 병합 셀 rowspan 확장 (병합 셀당 1회)
    updates = {anchor.id: replace(anchor, row_span=anchor.row_span + 1) for anchor in spanning}
    expanded = grid.replace_cells(updates)

    rows: List[RowItem] = list(expanded.rows)
    rows.insert(position, new_row)
    result = reconcile_indices(expanded.with_rows(rows))

    logger.debug(
        f"행 삽입: 위치 {position} ({direction} {row_index}), "
        f"rowspan 확장 {len(spanning)}개, 숨김 셀 {len(covered_cols)}개"
    )

    selection = tuple(
        SelectedCell.from_cell(cell) for cell in result.rows[position].cells if not cell.hidden
    )
    return EditResult(grid=result, selection=selection)


def insert_column(
    grid: GridSnapshot,
    col_index: int,
    direction: str = 'after',
    engine: Optional[ContentEngine] = None,
    width: Optional[int] = None,
) -> EditResult:
    """
    열 삽입

    Args:
        grid: 현재 스냅샷
        col_index: 기준 열 인덱스
        direction: 'before' (왼쪽) | 'after' (오른쪽)
        engine: 중첩 문서 엔진
        width: 새 열 너비 (px, None이면 기본 너비)

    Returns:
        EditResult: 새 스냅샷 + 새 열의 표시 셀

    Raises:
        OutOfRangeEdit: 기준 열이 범위를 벗어난 경우
    """
    engine = resolve_engine(engine)
    direction = normalize_direction(direction)
    position = _insert_position(col_index, grid.col_count, direction, '열')

    # 삽입 경계를 가로지르는 병합 셀 (position-1 열과 position 열을 모두 커버)
    spanning = [
        anchor for anchor in grid.anchors()
        if anchor.col_index < position <= anchor.end_col
    ]

    covered_rows: Dict[int, CellData] = {}
    for anchor in spanning:
        for r in range(anchor.row_index, anchor.end_row + 1):
            covered_rows[r] = anchor

    # 병합 셀 colspan 확장 (병합 셀당 1회)
    updates = {anchor.id: replace(anchor, col_span=anchor.col_span + 1) for anchor in spanning}
    expanded = grid.replace_cells(updates)

    rows = []
    for r, row in enumerate(expanded.rows):
        cells = list(row.cells)
        cells.insert(position, _new_cell(engine, r, position, hidden=r in covered_rows))
        rows.append(row.with_cells(cells))

    headers = list(grid.col_headers)
    headers.insert(position, ColHeader(id=uid(), width=width if width is not None else DEFAULT_CELL_WIDTH))

    result = reconcile_indices(
        GridSnapshot(col_headers=tuple(headers), rows=tuple(rows), bg_color=grid.bg_color)
    )

    logger.debug(
        f"열 삽입: 위치 {position} ({direction} {col_index}), "
        f"colspan 확장 {len(spanning)}개, 숨김 셀 {len(covered_rows)}개"
    )

    selection = tuple(
        SelectedCell.from_cell(row.cells[position])
        for row in result.rows
        if not row.cells[position].hidden
    )
    return EditResult(grid=result, selection=selection)
