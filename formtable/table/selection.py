# -*- coding: utf-8 -*-
"""
선택 영역 확장 모듈

사용자가 드래그한 사각형과 닿은 셀 목록을 받아,
병합 셀 때문에 함께 선택되어야 하는 셀까지 포함한 닫힌 선택 영역을 계산합니다.

처리 흐름:
1. 닿은 셀들의 경계 사각형 계산 (rowspan/colspan 포함)
2. 경계 사각형과 겹치는 숨김이 아닌 셀을 모두 추가
3. 경계 사각형을 다시 계산하여 바뀌지 않을 때까지 반복
4. 반복 상한을 넘으면 InvariantViolation (잘못된 그리드 데이터)
"""

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from ..config import MAX_EXPAND_ITERATIONS, get_logger
from ..errors import InvalidSelection, InvariantViolation
from .models import CellData, GridSnapshot, SelectedCell


logger = get_logger('selection')

Bounds = Tuple[int, int, int, int]


def _bounds(cells: Iterable[Union[SelectedCell, CellData]]) -> Optional[Bounds]:
    """(min_row, min_col, max_row, max_col) 경계 사각형"""
    min_row = min_col = max_row = max_col = None
    for cell in cells:
        if min_row is None:
            min_row, min_col = cell.row_index, cell.col_index
            max_row, max_col = cell.end_row, cell.end_col
            continue
        min_row = min(min_row, cell.row_index)
        min_col = min(min_col, cell.col_index)
        max_row = max(max_row, cell.end_row)
        max_col = max(max_col, cell.end_col)

    if min_row is None:
        return None
    return min_row, min_col, max_row, max_col


def _row_major(cells: Iterable[SelectedCell]) -> Tuple[SelectedCell, ...]:
    return tuple(sorted(cells, key=lambda v: (v.row_index, v.col_index)))


def expand_selection(
    touched: Iterable[SelectedCell],
    cells: Sequence[CellData],
    max_iterations: Optional[int] = None,
) -> Tuple[SelectedCell, ...]:
    """
    선택 영역을 병합 셀 기준으로 확장 (고정점까지 반복)

    Args:
        touched: 드래그 영역과 닿은 셀 목록
        cells: 테이블 전체 셀 목록 (조회용)
        max_iterations: 반복 상한 (None이면 설정 기본값)

    Returns:
        행 우선 순서로 정렬된 닫힌 선택 영역

    Raises:
        InvariantViolation: 반복 상한 안에 수렴하지 않는 경우
    """
    limit = MAX_EXPAND_ITERATIONS if max_iterations is None else max_iterations

    # 숨김 셀은 선택 대상이 아님
    candidates = [SelectedCell.from_cell(cell) for cell in cells if not cell.hidden]

    selected = {}
    for cell in touched:
        selected.setdefault(cell.id, cell)

    bounds = _bounds(selected.values())
    if bounds is None:
        return ()

    iterations = 0
    while True:
        if iterations >= limit:
            logger.error(f"선택 영역 확장이 {limit}회 안에 수렴하지 않음: {bounds}")
            raise InvariantViolation(
                f"선택 영역 확장이 {limit}회 반복 안에 수렴하지 않았습니다"
            )
        iterations += 1

        top, left, bottom, right = bounds
        extended = [
            v for v in candidates
            if v.id not in selected and _intersects(v, top, left, bottom, right)
        ]
        for v in extended:
            selected[v.id] = v

        next_bounds = _bounds(selected.values())
        if next_bounds == bounds:
            break
        bounds = next_bounds

    logger.debug(f"선택 영역 확장: {len(selected)}개 셀, 경계 {bounds}, 반복 {iterations}회")
    return _row_major(selected.values())


def _intersects(cell: SelectedCell, top: int, left: int, bottom: int, right: int) -> bool:
    return not (cell.end_row < top or cell.row_index > bottom or
                cell.end_col < left or cell.col_index > right)


def selection_from_ids(
    grid: GridSnapshot,
    cell_ids: Iterable[Union[str, SelectedCell]],
) -> Tuple[SelectedCell, ...]:
    """
    셀 id 목록을 현재 스냅샷 기준 선택 영역으로 변환

    Raises:
        InvalidSelection: 존재하지 않는 셀 id가 있는 경우
    """
    result = []
    seen = set()
    for cell_id in cell_ids:
        if isinstance(cell_id, SelectedCell):
            cell_id = cell_id.id
        if cell_id in seen:
            continue
        cell = grid.get_cell(cell_id)
        if cell is None:
            raise InvalidSelection(f"테이블에 없는 셀입니다: {cell_id}")
        seen.add(cell_id)
        result.append(SelectedCell.from_cell(cell))
    return _row_major(result)


def expand_in_grid(
    grid: GridSnapshot,
    cell_ids: Iterable[Union[str, SelectedCell]],
    max_iterations: Optional[int] = None,
) -> Tuple[SelectedCell, ...]:
    """스냅샷 안의 셀 id 목록을 닫힌 선택 영역으로 확장"""
    touched = selection_from_ids(grid, cell_ids)
    return expand_selection(touched, grid.cells(), max_iterations)


def select_range(
    grid: GridSnapshot,
    top: int,
    left: int,
    bottom: int,
    right: int,
    max_iterations: Optional[int] = None,
) -> Tuple[SelectedCell, ...]:
    """
    그리드 좌표 사각형으로 선택 (논리 좌표 기반 hit-test)

    두 모서리는 순서와 관계없이 지정할 수 있습니다.

    Args:
        grid: 대상 스냅샷
        top, left: 시작 위치
        bottom, right: 끝 위치

    Returns:
        닫힌 선택 영역
    """
    top, bottom = min(top, bottom), max(top, bottom)
    left, right = min(left, right), max(left, right)

    touched: List[SelectedCell] = [
        SelectedCell.from_cell(cell)
        for cell in grid.anchors()
        if cell.intersects(top, left, bottom, right)
    ]
    return expand_selection(touched, grid.cells(), max_iterations)
