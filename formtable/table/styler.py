# -*- coding: utf-8 -*-
"""
셀 표시 속성 편집 모듈

- set_cell_style: 선택 셀의 스타일 교체
- set_cell_borders: 선택 셀의 테두리 설정 (all/left/top/right/bottom/empty)
- set_column_width: 열 너비 변경 (최소 너비 보장)
"""

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..config import MIN_CELL_WIDTH, get_logger
from ..errors import InvalidSelection, OutOfRangeEdit
from .models import BORDER_DIRECTIONS, CellBorder, CellData, GridSnapshot, SelectedCell
from .selection import selection_from_ids


logger = get_logger('styler')


# 테두리 종류 -> 추가할 방향
BORDER_PRESETS = {
    'all': list(BORDER_DIRECTIONS),
    'left': ['left'],
    'top': ['top'],
    'right': ['right'],
    'bottom': ['bottom'],
    'empty': [],
}


def _selected_cells(grid: GridSnapshot, selection) -> List[CellData]:
    selected = selection_from_ids(grid, selection)
    if not selected:
        raise InvalidSelection("스타일을 적용할 셀이 선택되지 않았습니다")
    return [grid.get_cell(v.id) for v in selected]


def set_cell_style(
    grid: GridSnapshot,
    selection: Iterable[Union[str, SelectedCell]],
    style: Optional[Mapping[str, Any]],
) -> GridSnapshot:
    """
    선택 셀의 스타일 교체

    Args:
        grid: 현재 스냅샷
        selection: 선택 셀 목록
        style: 새 스타일 (예: {"background": "red"}), None이면 제거

    Returns:
        새 스냅샷
    """
    cells = _selected_cells(grid, selection)
    new_style: Optional[Dict[str, Any]] = dict(style) if style else None
    updates = {cell.id: replace(cell, style=new_style) for cell in cells}

    logger.debug(f"셀 스타일 변경: {len(updates)}개 {new_style}")
    return grid.replace_cells(updates)


def merge_borders(current: Iterable[CellBorder], kind: str) -> tuple:
    """
    기존 테두리에 새 테두리 추가 (방향 중복 제거)

    kind='empty'면 모든 테두리 제거
    """
    if kind not in BORDER_PRESETS:
        raise ValueError(f"알 수 없는 테두리 종류: {kind}")

    if kind == 'empty':
        return ()

    result = []
    seen = set()
    for border in list(current) + [CellBorder(direction=d) for d in BORDER_PRESETS[kind]]:
        if border.direction in seen:
            continue
        seen.add(border.direction)
        result.append(border)
    return tuple(result)


def set_cell_borders(
    grid: GridSnapshot,
    selection: Iterable[Union[str, SelectedCell]],
    kind: str,
) -> GridSnapshot:
    """
    선택 셀의 테두리 설정

    Args:
        grid: 현재 스냅샷
        selection: 선택 셀 목록
        kind: all | left | top | right | bottom | empty

    Returns:
        새 스냅샷
    """
    cells = _selected_cells(grid, selection)
    updates = {cell.id: replace(cell, borders=merge_borders(cell.borders, kind)) for cell in cells}

    logger.debug(f"셀 테두리 변경: {len(updates)}개 ({kind})")
    return grid.replace_cells(updates)


def set_column_width(
    grid: GridSnapshot,
    col_id: str,
    width: int,
    min_width: int = MIN_CELL_WIDTH,
) -> GridSnapshot:
    """
    열 너비 변경

    Args:
        grid: 현재 스냅샷
        col_id: 열 헤더 id
        width: 새 너비 (px)
        min_width: 최소 너비 (px)

    Returns:
        새 스냅샷

    Raises:
        OutOfRangeEdit: 존재하지 않는 열 id
    """
    position = grid.col_position(col_id)
    if position < 0:
        raise OutOfRangeEdit(f"테이블에 없는 열입니다: {col_id}")

    new_width = max(int(width), min_width)
    headers = [
        replace(h, width=new_width) if i == position else h
        for i, h in enumerate(grid.col_headers)
    ]

    logger.debug(f"열 너비 변경: {position}열 {new_width}px")
    return grid.with_col_headers(headers)
