# -*- coding: utf-8 -*-
"""
테이블 행/열 삭제 모듈

삭제 범위와 겹치는 병합 셀을 세 가지 경우로 나누어 처리합니다.

1. 완전 포함: 병합 영역 전체가 삭제 범위 안 → 병합 셀 삭제 (내용 폐기)
2. 한쪽 넘침: 병합 영역이 삭제 범위 한쪽 밖으로 이어짐
   → 삭제된 줄 수만큼 span 감소
   → 병합 기준 셀이 삭제 범위 안이면, 범위 바로 다음의 숨김 셀을 기준 셀로 승격
     (span 나머지, 내용, 스타일, 테두리 승계)
3. 양쪽 넘침: 병합 기준 셀이 삭제 범위 앞에 있고 범위 뒤까지 이어짐
   → 삭제된 줄 수만큼 span 감소

행 삭제는 한 행씩, 열 삭제는 선택한 병합 셀이 차지하는 연속 열 범위 단위로 처리합니다.
"""

from dataclasses import replace
from typing import Dict

from ..config import get_logger
from ..errors import OutOfRangeEdit
from .models import CellData, EditResult, GridSnapshot
from .reconciler import reconcile_indices


logger = get_logger('row_remover')


def _promote(cell: CellData, anchor: CellData, row_span: int, col_span: int) -> CellData:
    """숨김 셀을 병합 기준 셀로 승격 (내용/스타일/테두리 승계)"""
    return replace(
        cell,
        hidden=False,
        row_span=row_span,
        col_span=col_span,
        content=anchor.content,
        style=anchor.style,
        borders=anchor.borders,
    )


def remove_row(grid: GridSnapshot, row_index: int) -> EditResult:
    """
    행 삭제

    Args:
        grid: 현재 스냅샷
        row_index: 삭제할 행 인덱스

    Returns:
        EditResult: 새 스냅샷 (선택 영역 비움)

    Raises:
        OutOfRangeEdit: 행 인덱스가 범위를 벗어난 경우
    """
    if not (0 <= row_index < grid.row_count):
        raise OutOfRangeEdit(
            f"행 인덱스 {row_index}가 범위를 벗어났습니다. (총 {grid.row_count}개)"
        )

    updates: Dict[str, CellData] = {}
    deleted = promoted = shrunk = 0

    for anchor in grid.anchors():
        if not (anchor.row_index <= row_index <= anchor.end_row):
            continue

        if anchor.row_index == row_index:
            if anchor.row_span == 1:
                # 완전 포함 - 행과 함께 삭제
                deleted += 1
                continue

            # 기준 셀이 삭제되는 행에 있음 - 바로 아래 셀 승격
            below = grid.cell_at(row_index + 1, anchor.col_index)
            if below is None:
                deleted += 1
                continue
            updates[below.id] = _promote(below, anchor, anchor.row_span - 1, anchor.col_span)
            promoted += 1
        else:
            # 위쪽에서 이어지는 병합 셀 - rowspan 감소
            updates[anchor.id] = replace(anchor, row_span=anchor.row_span - 1)
            shrunk += 1

    updated = grid.replace_cells(updates)
    rows = [row for i, row in enumerate(updated.rows) if i != row_index]
    result = reconcile_indices(updated.with_rows(rows))

    logger.debug(
        f"행 삭제: {row_index}, 삭제 {deleted}개, 승격 {promoted}개, rowspan 감소 {shrunk}개"
    )
    return EditResult(grid=result, selection=())


def remove_columns(grid: GridSnapshot, start: int, end: int) -> EditResult:
    """
    연속 열 범위 삭제 [start, end]

    Args:
        grid: 현재 스냅샷
        start: 시작 열 인덱스
        end: 끝 열 인덱스 (포함)

    Returns:
        EditResult: 새 스냅샷 (선택 영역 비움)

    Raises:
        OutOfRangeEdit: 열 범위가 테이블 범위를 벗어난 경우
    """
    if start > end:
        start, end = end, start
    if not (0 <= start and end < grid.col_count):
        raise OutOfRangeEdit(
            f"열 범위 [{start}, {end}]가 범위를 벗어났습니다. (총 {grid.col_count}개)"
        )

    removed_count = end - start + 1
    updates: Dict[str, CellData] = {}
    deleted = promoted = shrunk = 0

    for anchor in grid.anchors():
        if anchor.end_col < start or anchor.col_index > end:
            continue

        if anchor.col_index >= start:
            if anchor.end_col <= end:
                # 완전 포함 - 열과 함께 삭제
                deleted += 1
                continue

            # 오른쪽 넘침 - 기준 셀이 삭제되므로 범위 바로 다음 셀 승격
            right = grid.cell_at(anchor.row_index, end + 1)
            if right is None:
                deleted += 1
                continue
            updates[right.id] = _promote(right, anchor, anchor.row_span, anchor.end_col - end)
            promoted += 1
        else:
            # 왼쪽 넘침 / 양쪽 넘침 - 겹친 열 수만큼 colspan 감소
            overlap = min(end, anchor.end_col) - start + 1
            updates[anchor.id] = replace(anchor, col_span=anchor.col_span - overlap)
            shrunk += 1

    updated = grid.replace_cells(updates)
    rows = [
        row.with_cells(cell for j, cell in enumerate(row.cells) if not (start <= j <= end))
        for row in updated.rows
    ]
    headers = [h for j, h in enumerate(grid.col_headers) if not (start <= j <= end)]

    result = reconcile_indices(
        GridSnapshot(col_headers=tuple(headers), rows=tuple(rows), bg_color=grid.bg_color)
    )

    logger.debug(
        f"열 삭제: [{start}, {end}] ({removed_count}개), 삭제 {deleted}개, "
        f"승격 {promoted}개, colspan 감소 {shrunk}개"
    )
    return EditResult(grid=result, selection=())


def remove_column(grid: GridSnapshot, col_index: int) -> EditResult:
    """열 하나 삭제"""
    return remove_columns(grid, col_index, col_index)
