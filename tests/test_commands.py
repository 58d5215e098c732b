# -*- coding: utf-8 -*-
"""편집 명령 처리 (FormTableEditor) 테스트"""

import logging

import pytest

from formtable.errors import InvariantViolation
from formtable.table import (
    CellData,
    ColHeader,
    CommandType,
    FormTableEditor,
    GridSnapshot,
    RowItem,
    TableCommand,
    can_insert,
    can_remove,
    can_set_style,
    create_grid,
)

from conftest import ids_at


@pytest.fixture
def editor(grid_3x3, engine, config):
    return FormTableEditor(grid_3x3, engine=engine, config=config)


def test_command_type_from_string():
    command = TableCommand('mergeSelection')
    assert command.type is CommandType.MERGE_SELECTION


def test_select_expands(merged_2x2, engine, config):
    editor = FormTableEditor(merged_2x2, engine=engine, config=config)

    selection = editor.select(ids_at(merged_2x2, [(1, 2), (2, 1)]))

    assert len(selection) == 6
    assert editor.selection == selection


def test_merge_and_split(editor, text_at):
    editor.select_range(0, 0, 1, 1)
    assert editor.can_merge()

    result = editor.merge()

    assert result.success
    assert result.errors == []
    assert len(result.selection) == 1
    assert editor.grid.cell_at(0, 0).row_span == 2
    assert text_at(editor.grid, 0, 0) == "A\nB\nD\nE"
    assert editor.can_split()

    result = editor.split()

    assert result.success
    assert len(editor.selection) == 4
    assert all(not cell.hidden for cell in editor.grid.cells())


def test_rejected_command_keeps_snapshot(editor, caplog):
    """병합 불가 선택 -> 실패 결과, 이전 스냅샷 유지, 경고 로그"""
    before = editor.grid
    editor.select(ids_at(before, [(0, 0)]))

    with caplog.at_level(logging.WARNING, logger='formtable'):
        result = editor.merge()

    assert not result.success
    assert result.grid is before
    assert editor.grid is before
    assert len(result.errors) == 1
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_command_selection_overrides_editor_selection(editor):
    ids = ids_at(editor.grid, [(2, 0), (2, 1)])

    result = editor.dispatch(TableCommand(CommandType.MERGE_SELECTION, selection=tuple(ids)))

    assert result.success
    assert editor.grid.cell_at(2, 0).col_span == 2


def test_insert_row_keeps_selection(editor):
    target = ids_at(editor.grid, [(1, 1)])
    editor.select(target)

    result = editor.insert_row('before')

    assert result.success
    assert editor.grid.row_count == 4
    assert [v.id for v in editor.selection] == target
    assert editor.selection[0].row_index == 2


def test_insert_requires_single_cell(editor):
    editor.select(ids_at(editor.grid, [(0, 0), (0, 1)]))

    assert not editor.can_insert()
    result = editor.insert_column()

    assert not result.success
    assert editor.grid.col_count == 3


def test_insert_by_row_and_col_id(editor):
    row_id = editor.grid.rows[2].id
    col_id = editor.grid.col_headers[0].id

    assert editor.insert_row('after', row_id=row_id).success
    assert editor.insert_column('before', col_id=col_id).success

    assert editor.grid.row_count == 4
    assert editor.grid.col_count == 4
    assert editor.grid.col_headers[0].width == editor.config.default_cell_width


def test_insert_unknown_col_id(editor):
    result = editor.insert_column(col_id='missing')

    assert not result.success
    assert result.errors


def test_remove_column_uses_merged_width(merged_2x2, engine, config, text_at):
    """병합 셀 선택 후 열 삭제 -> 병합 셀이 차지하는 열 전체 삭제"""
    editor = FormTableEditor(merged_2x2, engine=engine, config=config)
    editor.select(ids_at(merged_2x2, [(0, 0)]))

    result = editor.remove_column()

    assert result.success
    assert editor.grid.col_count == 1
    assert editor.selection == ()
    assert [text_at(editor.grid, r, 0) for r in range(3)] == ["C", "F", "I"]


def test_remove_row_by_id(merged_2x2, engine, config, text_at):
    editor = FormTableEditor(merged_2x2, engine=engine, config=config)

    result = editor.remove_row(row_id=merged_2x2.rows[0].id)

    assert result.success
    assert editor.grid.cell_at(0, 0).col_span == 2
    assert text_at(editor.grid, 0, 0) == "A\nB\nD\nE"


def test_style_commands(editor):
    editor.select(ids_at(editor.grid, [(0, 0), (0, 1)]))

    assert editor.set_style({'background': 'yellow'}).success
    assert editor.set_borders('top').success

    grid = editor.grid
    assert grid.cell_at(0, 1).style == {'background': 'yellow'}
    assert [b.direction for b in grid.cell_at(0, 0).borders] == ['top']
    assert len(editor.selection) == 2


def test_set_column_width_by_col_id(editor):
    col_id = editor.grid.col_headers[2].id

    result = editor.set_column_width(30, col_id=col_id)

    assert result.success
    assert editor.grid.col_headers[2].width == editor.config.min_cell_width


def test_set_column_width_from_selected_cell(editor):
    editor.select(ids_at(editor.grid, [(1, 1)]))

    assert editor.set_column_width(260).success
    assert [h.width for h in editor.grid.col_headers] == [200, 260, 200]


def test_set_borders_unknown_kind(editor):
    editor.select(ids_at(editor.grid, [(0, 0)]))

    result = editor.set_borders('zigzag')

    assert not result.success


def test_invariant_violation_is_raised(engine, config):
    """불변 조건 위반은 실패 결과가 아니라 예외"""
    broken = GridSnapshot(
        col_headers=(ColHeader('c0'), ColHeader('c1')),
        rows=(RowItem('r0', cells=(CellData('a'), CellData('b', 0, 1, hidden=True))),),
    )
    editor = FormTableEditor(broken, engine=engine, config=config)

    with pytest.raises(InvariantViolation):
        editor.dispatch(TableCommand(CommandType.SET_CELL_STYLE, selection=('a',), style={'x': 1}))

    assert editor.grid is broken


def test_predicates(merged_2x2):
    anchor = merged_2x2.cell_at(0, 0).id

    assert can_insert(merged_2x2, [anchor])
    assert not can_insert(merged_2x2, [])
    assert can_insert(merged_2x2, row_id=merged_2x2.rows[1].id)
    assert not can_insert(merged_2x2, col_id='missing')
    assert can_remove(merged_2x2, [anchor])
    assert not can_remove(create_grid(0, 0), row_id='r')
    assert can_set_style(merged_2x2, [anchor])
    assert not can_set_style(merged_2x2, [])
    assert not can_set_style(merged_2x2, ['missing'])
