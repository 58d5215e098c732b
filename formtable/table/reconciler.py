# -*- coding: utf-8 -*-
"""
행/열 인덱스 재계산 및 불변 조건 검사

모든 구조 편집 연산의 마지막 단계에서 reconcile_indices를 호출합니다.
선택 영역 확장과 병합 계산이 모두 인덱스에 의존하므로 생략하면 안 됩니다.

주요 기능:
- reconcile_indices: row_index/col_index를 배열 위치로 재계산 + 병합 영역 겹침 검사
- check_invariants: 전체 불변 조건 검사 (커버리지, 숨김 셀 소속, 헤더 수)
"""

from dataclasses import replace
from typing import Dict, Tuple

from ..config import get_logger
from ..errors import InvariantViolation
from .models import GridSnapshot


logger = get_logger('reconciler')


def reconcile_indices(grid: GridSnapshot) -> GridSnapshot:
    """
    모든 셀의 row_index/col_index를 행/셀 배열 위치로 재계산

    Args:
        grid: 행/셀 순서는 맞지만 인덱스가 오래되었을 수 있는 스냅샷

    Returns:
        인덱스가 정규화된 새 스냅샷

    Raises:
        InvariantViolation: 병합 영역이 서로 겹치는 경우
    """
    rows = []
    for i, row in enumerate(grid.rows):
        cells = []
        for j, cell in enumerate(row.cells):
            if cell.row_index != i or cell.col_index != j:
                cell = replace(cell, row_index=i, col_index=j)
            cells.append(cell)
        rows.append(row.with_cells(cells))

    result = grid.with_rows(rows)
    _build_owner_map(result)
    return result


def _build_owner_map(grid: GridSnapshot) -> Dict[Tuple[int, int], str]:
    """
    위치 -> 커버하는 병합 기준 셀 id 매핑

    그리드 범위를 벗어나는 영역은 무시합니다.
    """
    owners: Dict[Tuple[int, int], str] = {}
    row_count = grid.row_count

    for anchor in grid.anchors():
        for r in range(anchor.row_index, anchor.end_row + 1):
            if r >= row_count:
                break
            col_count = len(grid.rows[r].cells)
            for c in range(anchor.col_index, anchor.end_col + 1):
                if c >= col_count:
                    break
                other = owners.get((r, c))
                if other is not None:
                    logger.error(f"병합 영역 겹침: ({r}, {c}) - {other} / {anchor.id}")
                    raise InvariantViolation(
                        f"병합 영역이 겹칩니다: ({r}, {c}) 위치를 {other}, {anchor.id} 셀이 함께 커버"
                    )
                owners[(r, c)] = anchor.id
    return owners


def check_invariants(grid: GridSnapshot):
    """
    그리드 불변 조건 전체 검사

    1. 모든 위치는 정확히 하나의 셀 영역에 속함
    2. 숨김 셀은 숨김이 아닌 병합 기준 셀 영역 안에 있음
    3. row_index/col_index가 배열 위치와 일치
    4. 병합 영역끼리 겹치지 않음
    5. 열 헤더 수 == 각 행의 셀 수

    Raises:
        InvariantViolation: 조건 위반 시
    """
    col_count = grid.col_count

    for i, row in enumerate(grid.rows):
        if len(row.cells) != col_count:
            raise InvariantViolation(
                f"행 {i}의 셀 수({len(row.cells)})가 열 헤더 수({col_count})와 다릅니다"
            )
        for j, cell in enumerate(row.cells):
            if cell.row_index != i or cell.col_index != j:
                raise InvariantViolation(
                    f"셀 {cell.id}의 인덱스({cell.row_index}, {cell.col_index})가 "
                    f"실제 위치({i}, {j})와 다릅니다"
                )
            if cell.row_span < 1 or cell.col_span < 1:
                raise InvariantViolation(f"셀 {cell.id}의 병합 크기가 잘못되었습니다")

    for anchor in grid.anchors():
        if anchor.end_row >= grid.row_count or anchor.end_col >= col_count:
            raise InvariantViolation(f"셀 {anchor.id}의 병합 영역이 테이블 범위를 벗어납니다")

    owners = _build_owner_map(grid)

    for cell in grid.iter_cells():
        owner = owners.get((cell.row_index, cell.col_index))
        if owner is None:
            raise InvariantViolation(
                f"({cell.row_index}, {cell.col_index}) 위치를 커버하는 셀이 없습니다"
            )
        if cell.hidden and owner == cell.id:
            raise InvariantViolation(f"숨김 셀 {cell.id}가 병합 기준 셀로 사용되었습니다")
        if not cell.hidden and owner != cell.id:
            raise InvariantViolation(
                f"셀 {cell.id}가 숨김 상태가 아니지만 {owner} 병합 영역 안에 있습니다"
            )
        if cell.hidden and (cell.row_span != 1 or cell.col_span != 1):
            raise InvariantViolation(f"숨김 셀 {cell.id}에 병합 크기가 남아 있습니다")
