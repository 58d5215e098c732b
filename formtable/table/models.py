# -*- coding: utf-8 -*-
"""
폼 테이블 데이터 모델

개요:
- CellBorder: 셀 테두리 설정
- CellData: 테이블 셀 (병합 기준 셀 / 숨김 셀 포함)
- SelectedCell: 선택 영역에 포함된 셀 정보
- ColHeader: 열 헤더 (너비)
- RowItem: 행 (셀 목록)
- GridSnapshot: 테이블 전체 스냅샷 (불변)
- EditResult: 구조 편집 결과 (새 스냅샷 + 선택 영역)

모든 모델은 불변(frozen)이며, 편집 연산은 항상 새 스냅샷을 만듭니다.
숨김 셀도 행의 셀 목록에 그대로 남아 있으므로 셀의 배열 위치가 곧 실제 열 좌표입니다.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..config import DEFAULT_CELL_WIDTH


BORDER_DIRECTIONS = ('left', 'top', 'right', 'bottom')


@dataclass(frozen=True)
class CellBorder:
    """셀 테두리 (방향)"""
    direction: str = 'left'


@dataclass(frozen=True)
class CellData:
    """테이블 셀 정보"""
    id: str
    row_index: int = 0
    col_index: int = 0
    row_span: int = 1
    col_span: int = 1

    # 다른 병합 영역 안에 포함된 셀
    hidden: bool = False

    # 중첩 문서 핸들 (ContentEngine 소유, 해석하지 않음)
    content: Any = field(default=None, compare=False)

    # 표시 속성
    style: Optional[Mapping[str, Any]] = None
    borders: Tuple[CellBorder, ...] = ()

    def __post_init__(self):
        if not isinstance(self.borders, tuple):
            object.__setattr__(self, 'borders', tuple(self.borders or ()))

    @property
    def end_row(self) -> int:
        return self.row_index + self.row_span - 1

    @property
    def end_col(self) -> int:
        return self.col_index + self.col_span - 1

    @property
    def is_merged(self) -> bool:
        """1x1보다 큰 병합 셀인지 확인"""
        return self.row_span + self.col_span > 2

    @property
    def area(self) -> int:
        return self.row_span * self.col_span

    # 셀이 차지하는 영역 (rowspan/colspan으로 확장된 영역)
    def covers(self, row: int, col: int) -> bool:
        """특정 (row, col) 위치를 이 셀이 커버하는지 확인"""
        return (self.row_index <= row <= self.end_row and
                self.col_index <= col <= self.end_col)

    def intersects(self, top: int, left: int, bottom: int, right: int) -> bool:
        """사각형 영역과 겹치는지 확인"""
        return not (self.end_row < top or self.row_index > bottom or
                    self.end_col < left or self.col_index > right)

    def to_selected(self) -> 'SelectedCell':
        return SelectedCell.from_cell(self)


@dataclass(frozen=True)
class SelectedCell:
    """선택 영역의 셀 (id + 위치 + 병합 크기)"""
    id: str
    row_index: int = 0
    col_index: int = 0
    row_span: int = 1
    col_span: int = 1

    @property
    def end_row(self) -> int:
        return self.row_index + self.row_span - 1

    @property
    def end_col(self) -> int:
        return self.col_index + self.col_span - 1

    @property
    def is_merged(self) -> bool:
        return self.row_span + self.col_span > 2

    @classmethod
    def from_cell(cls, cell: CellData) -> 'SelectedCell':
        return cls(
            id=cell.id,
            row_index=cell.row_index,
            col_index=cell.col_index,
            row_span=cell.row_span,
            col_span=cell.col_span,
        )


@dataclass(frozen=True)
class ColHeader:
    """열 헤더 (너비: px)"""
    id: str
    width: int = DEFAULT_CELL_WIDTH


@dataclass(frozen=True)
class RowItem:
    """테이블 행"""
    id: str
    cells: Tuple[CellData, ...] = ()
    height: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, 'cells', tuple(self.cells))

    def with_cells(self, cells: Iterable[CellData]) -> 'RowItem':
        return replace(self, cells=tuple(cells))


@dataclass(frozen=True)
class GridSnapshot:
    """
    테이블 스냅샷

    읽기 접근자와 새 스냅샷을 만드는 변환만 제공합니다.
    이전 스냅샷은 어떤 연산에서도 변경되지 않습니다.
    """
    col_headers: Tuple[ColHeader, ...] = ()
    rows: Tuple[RowItem, ...] = ()
    bg_color: Optional[str] = None

    # id -> CellData 인덱스
    _cells_by_id: Dict[str, CellData] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        if not isinstance(self.col_headers, tuple):
            object.__setattr__(self, 'col_headers', tuple(self.col_headers))
        if not isinstance(self.rows, tuple):
            object.__setattr__(self, 'rows', tuple(self.rows))

        index = {}
        for row in self.rows:
            for cell in row.cells:
                index[cell.id] = cell
        object.__setattr__(self, '_cells_by_id', index)

    # ========== 크기 ==========

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.col_headers)

    # ========== 셀 조회 ==========

    def cells(self) -> Tuple[CellData, ...]:
        """모든 셀 (행 우선 순서)"""
        return tuple(cell for row in self.rows for cell in row.cells)

    def iter_cells(self) -> Iterator[CellData]:
        for row in self.rows:
            yield from row.cells

    def anchors(self) -> List[CellData]:
        """숨김이 아닌 셀 (병합 기준 셀 및 일반 셀)"""
        return [cell for cell in self.iter_cells() if not cell.hidden]

    def get_cell(self, cell_id: str) -> Optional[CellData]:
        """id로 셀 찾기"""
        return self._cells_by_id.get(cell_id)

    def has_cell(self, cell_id: str) -> bool:
        return cell_id in self._cells_by_id

    def cell_at(self, row: int, col: int) -> Optional[CellData]:
        """특정 위치의 셀 (숨김 셀 포함)"""
        if not (0 <= row < len(self.rows)):
            return None
        cells = self.rows[row].cells
        if not (0 <= col < len(cells)):
            return None
        return cells[col]

    def anchor_at(self, row: int, col: int) -> Optional[CellData]:
        """특정 위치를 커버하는 병합 기준 셀 (병합 셀 고려)"""
        cell = self.cell_at(row, col)
        if cell is None:
            return None
        if not cell.hidden:
            return cell

        # rowspan/colspan으로 커버되는 셀 찾기
        for anchor in self.anchors():
            if anchor.covers(row, col):
                return anchor
        return None

    def hidden_cells_in(self, anchor: CellData) -> List[CellData]:
        """병합 영역 안의 숨김 셀 목록"""
        result = []
        for r in range(anchor.row_index, anchor.end_row + 1):
            for c in range(anchor.col_index, anchor.end_col + 1):
                cell = self.cell_at(r, c)
                if cell is not None and cell.hidden:
                    result.append(cell)
        return result

    # ========== 행/열 조회 ==========

    def row_position(self, row_id: str) -> int:
        """행 id의 위치 (없으면 -1)"""
        for i, row in enumerate(self.rows):
            if row.id == row_id:
                return i
        return -1

    def col_position(self, col_id: str) -> int:
        """열 헤더 id의 위치 (없으면 -1)"""
        for i, header in enumerate(self.col_headers):
            if header.id == col_id:
                return i
        return -1

    def total_area(self) -> int:
        """병합 기준 셀 면적 합 (row_count * col_count와 같아야 함)"""
        return sum(cell.area for cell in self.anchors())

    # ========== 변환 ==========

    def with_rows(self, rows: Iterable[RowItem]) -> 'GridSnapshot':
        return GridSnapshot(col_headers=self.col_headers, rows=tuple(rows), bg_color=self.bg_color)

    def with_col_headers(self, col_headers: Iterable[ColHeader]) -> 'GridSnapshot':
        return GridSnapshot(col_headers=tuple(col_headers), rows=self.rows, bg_color=self.bg_color)

    def replace_cells(self, updates: Mapping[str, CellData]) -> 'GridSnapshot':
        """id 기준으로 셀 교체한 새 스냅샷"""
        if not updates:
            return self
        rows = [
            row.with_cells(updates.get(cell.id, cell) for cell in row.cells)
            for row in self.rows
        ]
        return self.with_rows(rows)


@dataclass(frozen=True)
class EditResult:
    """구조 편집 결과"""
    grid: GridSnapshot
    selection: Tuple[SelectedCell, ...] = ()

    @property
    def selected_ids(self) -> List[str]:
        return [cell.id for cell in self.selection]
