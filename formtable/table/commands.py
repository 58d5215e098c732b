# -*- coding: utf-8 -*-
"""
테이블 편집 명령 처리

호스트(툴바, 단축키)는 TableCommand를 만들어 FormTableEditor.dispatch로 전달합니다.
편집기는 현재 스냅샷과 선택 영역을 보관하고, 명령마다 새 스냅샷으로 교체합니다.

오류 처리:
- InvalidSelection / OutOfRangeEdit: 경고 로그, 이전 스냅샷 유지, CommandResult.errors에 메시지
- InvariantViolation: 에러 로그 후 다시 발생 (부분 결과는 반영하지 않음)

사용 예:
    editor = FormTableEditor(create_grid(3, 3))
    editor.select([a.id, b.id])
    result = editor.dispatch(TableCommand(CommandType.MERGE_SELECTION))
    if not result.success:
        print(result.errors)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..config import get_logger
from ..config_loader import TableConfig, load_table_config
from ..errors import InvalidSelection, InvariantViolation, OutOfRangeEdit
from .cell_splitter import can_split, split_cells
from .content import ContentEngine, resolve_engine
from .merger import can_merge, merge_cells
from .models import EditResult, GridSnapshot, SelectedCell
from .reconciler import check_invariants
from .row_builder import insert_column, insert_row, normalize_direction
from .row_remover import remove_columns, remove_row
from .selection import expand_in_grid, select_range, selection_from_ids
from .styler import BORDER_PRESETS, set_cell_borders, set_cell_style, set_column_width


logger = get_logger('commands')


class CommandType(str, Enum):
    """편집 명령 종류"""
    MERGE_SELECTION = 'mergeSelection'
    SPLIT_SELECTION = 'splitSelection'
    INSERT_ROW = 'insertRow'
    INSERT_COLUMN = 'insertColumn'
    REMOVE_ROW = 'removeRow'
    REMOVE_COLUMN = 'removeColumn'
    SET_CELL_STYLE = 'setCellStyle'
    SET_CELL_BORDERS = 'setCellBorders'
    SET_COLUMN_WIDTH = 'setColumnWidth'


@dataclass
class TableCommand:
    """
    편집 명령

    selection이 비어 있으면 편집기의 현재 선택 영역을 사용합니다.
    행/열 명령은 선택 셀 대신 row_id / col_id로 대상을 지정할 수 있습니다.
    """
    type: CommandType
    selection: Tuple[Union[str, SelectedCell], ...] = ()
    direction: Optional[str] = None
    row_id: Optional[str] = None
    col_id: Optional[str] = None

    # 표시 속성 명령 인자
    style: Optional[Mapping[str, Any]] = None
    border: Optional[str] = None
    width: Optional[int] = None

    def __post_init__(self):
        self.type = CommandType(self.type)
        self.selection = tuple(self.selection or ())
        if self.direction is not None:
            self.direction = normalize_direction(self.direction)


@dataclass
class CommandResult:
    """명령 실행 결과"""
    success: bool = True
    grid: Optional[GridSnapshot] = None
    selection: Tuple[SelectedCell, ...] = ()
    errors: List[str] = field(default_factory=list)


# ========== 실행 가능 여부 ==========

def _single_target(grid: GridSnapshot, selection) -> Optional[SelectedCell]:
    try:
        selected = selection_from_ids(grid, selection)
    except InvalidSelection:
        return None
    return selected[0] if len(selected) == 1 else None


def can_insert(
    grid: GridSnapshot,
    selection: Iterable[Union[str, SelectedCell]] = (),
    row_id: Optional[str] = None,
    col_id: Optional[str] = None,
) -> bool:
    """행/열 삽입 가능 여부 (대상 행/열 또는 선택 셀 1개)"""
    if row_id is not None:
        return grid.row_position(row_id) >= 0
    if col_id is not None:
        return grid.col_position(col_id) >= 0
    return _single_target(grid, selection) is not None


def can_remove(
    grid: GridSnapshot,
    selection: Iterable[Union[str, SelectedCell]] = (),
    row_id: Optional[str] = None,
    col_id: Optional[str] = None,
) -> bool:
    """행/열 삭제 가능 여부"""
    if grid.row_count == 0 or grid.col_count == 0:
        return False
    return can_insert(grid, selection, row_id=row_id, col_id=col_id)


def can_set_style(grid: GridSnapshot, selection: Iterable[Union[str, SelectedCell]]) -> bool:
    """스타일 설정 가능 여부 (선택 셀 1개 이상)"""
    try:
        return bool(selection_from_ids(grid, selection))
    except InvalidSelection:
        return False


# ========== 편집기 ==========

class FormTableEditor:
    """
    폼 테이블 편집기

    현재 스냅샷, 선택 영역, 중첩 문서 엔진, 설정을 보관하고 명령을 실행합니다.
    """

    def __init__(
        self,
        grid: GridSnapshot,
        engine: Optional[ContentEngine] = None,
        config: Optional[TableConfig] = None,
    ):
        self.grid = grid
        self.engine = resolve_engine(engine)
        self.config = config if config is not None else load_table_config()
        self.selection: Tuple[SelectedCell, ...] = ()

        self._handlers: Dict[CommandType, Callable[[TableCommand, Tuple], EditResult]] = {
            CommandType.MERGE_SELECTION: self._merge,
            CommandType.SPLIT_SELECTION: self._split,
            CommandType.INSERT_ROW: self._insert_row,
            CommandType.INSERT_COLUMN: self._insert_column,
            CommandType.REMOVE_ROW: self._remove_row,
            CommandType.REMOVE_COLUMN: self._remove_column,
            CommandType.SET_CELL_STYLE: self._set_style,
            CommandType.SET_CELL_BORDERS: self._set_borders,
            CommandType.SET_COLUMN_WIDTH: self._set_column_width,
        }

    # ========== 선택 ==========

    def select(self, cell_ids: Iterable[Union[str, SelectedCell]]) -> Tuple[SelectedCell, ...]:
        """셀 id 목록을 닫힌 선택 영역으로 확장하여 선택"""
        self.selection = expand_in_grid(
            self.grid, cell_ids, max_iterations=self.config.max_expand_iterations
        )
        return self.selection

    def select_range(self, top: int, left: int, bottom: int, right: int) -> Tuple[SelectedCell, ...]:
        """좌표 사각형으로 선택"""
        self.selection = select_range(
            self.grid, top, left, bottom, right,
            max_iterations=self.config.max_expand_iterations,
        )
        return self.selection

    def clear_selection(self):
        self.selection = ()

    # ========== 명령 실행 ==========

    def dispatch(self, command: TableCommand) -> CommandResult:
        """
        명령 실행

        Args:
            command: 편집 명령

        Returns:
            CommandResult: 성공 여부, 새(또는 기존) 스냅샷, 선택 영역, 오류 메시지

        Raises:
            InvariantViolation: 그리드 불변 조건이 깨진 경우
        """
        selection = command.selection or self.selection
        handler = self._handlers[command.type]

        try:
            result = handler(command, selection)
            if self.config.strict_invariants:
                check_invariants(result.grid)
        except (InvalidSelection, OutOfRangeEdit) as e:
            logger.warning(f"명령 거부 [{command.type.value}]: {e}")
            return CommandResult(
                success=False,
                grid=self.grid,
                selection=self.selection,
                errors=[str(e)],
            )
        except InvariantViolation as e:
            logger.error(f"불변 조건 위반 [{command.type.value}]: {e}")
            raise

        self.grid = result.grid
        self.selection = result.selection
        logger.debug(f"명령 실행 [{command.type.value}]: 선택 {len(self.selection)}개")

        return CommandResult(success=True, grid=self.grid, selection=self.selection)

    # ========== 편의 메서드 ==========

    def merge(self) -> CommandResult:
        return self.dispatch(TableCommand(CommandType.MERGE_SELECTION))

    def split(self) -> CommandResult:
        return self.dispatch(TableCommand(CommandType.SPLIT_SELECTION))

    def insert_row(self, direction: str = 'after', row_id: Optional[str] = None) -> CommandResult:
        return self.dispatch(TableCommand(CommandType.INSERT_ROW, direction=direction, row_id=row_id))

    def insert_column(self, direction: str = 'after', col_id: Optional[str] = None) -> CommandResult:
        return self.dispatch(TableCommand(CommandType.INSERT_COLUMN, direction=direction, col_id=col_id))

    def remove_row(self, row_id: Optional[str] = None) -> CommandResult:
        return self.dispatch(TableCommand(CommandType.REMOVE_ROW, row_id=row_id))

    def remove_column(self, col_id: Optional[str] = None) -> CommandResult:
        return self.dispatch(TableCommand(CommandType.REMOVE_COLUMN, col_id=col_id))

    def set_style(self, style: Optional[Mapping[str, Any]]) -> CommandResult:
        return self.dispatch(TableCommand(CommandType.SET_CELL_STYLE, style=style))

    def set_borders(self, kind: str) -> CommandResult:
        return self.dispatch(TableCommand(CommandType.SET_CELL_BORDERS, border=kind))

    def set_column_width(self, width: int, col_id: Optional[str] = None) -> CommandResult:
        return self.dispatch(TableCommand(CommandType.SET_COLUMN_WIDTH, width=width, col_id=col_id))

    # ========== 실행 가능 여부 ==========

    def can_merge(self) -> bool:
        return can_merge(self.grid, self.selection)

    def can_split(self) -> bool:
        return can_split(self.grid, self.selection)

    def can_insert(self) -> bool:
        return can_insert(self.grid, self.selection)

    def can_remove(self) -> bool:
        return can_remove(self.grid, self.selection)

    def can_set_style(self) -> bool:
        return can_set_style(self.grid, self.selection)

    # ========== 대상 계산 ==========

    def _target_cell(self, selection) -> SelectedCell:
        """행/열 명령의 기준 셀 (선택 셀 정확히 1개)"""
        selected = selection_from_ids(self.grid, selection)
        if len(selected) != 1:
            raise InvalidSelection(
                f"행/열 편집은 셀 1개를 선택해야 합니다 (선택 {len(selected)}개)"
            )
        return selected[0]

    def _target_row(self, command: TableCommand, selection) -> int:
        if command.row_id is not None:
            position = self.grid.row_position(command.row_id)
            if position < 0:
                raise OutOfRangeEdit(f"테이블에 없는 행입니다: {command.row_id}")
            return position
        return self._target_cell(selection).row_index

    def _target_cols(self, command: TableCommand, selection) -> Tuple[int, int]:
        if command.col_id is not None:
            position = self.grid.col_position(command.col_id)
            if position < 0:
                raise OutOfRangeEdit(f"테이블에 없는 열입니다: {command.col_id}")
            return position, position
        cell = self._target_cell(selection)
        return cell.col_index, cell.end_col

    def _keep_selection(self, grid: GridSnapshot, selection) -> Tuple[SelectedCell, ...]:
        """새 스냅샷 기준으로 기존 선택 영역 갱신 (사라진 셀 제외)"""
        ids = [v.id if isinstance(v, SelectedCell) else v for v in selection]
        return selection_from_ids(grid, [cell_id for cell_id in ids if grid.has_cell(cell_id)])

    # ========== 명령 처리기 ==========

    def _merge(self, command: TableCommand, selection) -> EditResult:
        return merge_cells(self.grid, selection, self.engine)

    def _split(self, command: TableCommand, selection) -> EditResult:
        return split_cells(self.grid, selection, self.engine)

    def _insert_row(self, command: TableCommand, selection) -> EditResult:
        row_index = self._target_row(command, selection)
        result = insert_row(self.grid, row_index, command.direction or 'after', self.engine)
        return EditResult(result.grid, self._keep_selection(result.grid, selection))

    def _insert_column(self, command: TableCommand, selection) -> EditResult:
        col_index, _ = self._target_cols(command, selection)
        result = insert_column(
            self.grid, col_index, command.direction or 'after', self.engine,
            width=self.config.default_cell_width,
        )
        return EditResult(result.grid, self._keep_selection(result.grid, selection))

    def _remove_row(self, command: TableCommand, selection) -> EditResult:
        return remove_row(self.grid, self._target_row(command, selection))

    def _remove_column(self, command: TableCommand, selection) -> EditResult:
        start, end = self._target_cols(command, selection)
        return remove_columns(self.grid, start, end)

    def _set_style(self, command: TableCommand, selection) -> EditResult:
        grid = set_cell_style(self.grid, selection, command.style)
        return EditResult(grid, self._keep_selection(grid, selection))

    def _set_borders(self, command: TableCommand, selection) -> EditResult:
        kind = command.border or 'all'
        if kind not in BORDER_PRESETS:
            raise InvalidSelection(f"알 수 없는 테두리 종류: {kind}")
        grid = set_cell_borders(self.grid, selection, kind)
        return EditResult(grid, self._keep_selection(grid, selection))

    def _set_column_width(self, command: TableCommand, selection) -> EditResult:
        if command.width is None:
            raise InvalidSelection("열 너비가 지정되지 않았습니다")

        col_id = command.col_id
        if col_id is None:
            col_index, _ = self._target_cols(command, selection)
            col_id = self.grid.col_headers[col_index].id

        grid = set_column_width(self.grid, col_id, command.width, self.config.min_cell_width)
        return EditResult(grid, self._keep_selection(grid, selection))
