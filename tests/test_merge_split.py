# -*- coding: utf-8 -*-
"""셀 병합 / 분할 테스트"""

import pytest

from formtable.errors import InvalidSelection
from formtable.table import (
    can_merge,
    can_split,
    check_invariants,
    merge_cells,
    split_cells,
)

from conftest import ids_at


def test_merge_top_left_2x2(grid_3x3, engine, text_at):
    """2x2 병합: 기준 셀 1개, 숨김 3개, 나머지 5개 그대로"""
    ids = ids_at(grid_3x3, [(0, 0), (0, 1), (1, 0), (1, 1)])

    result = merge_cells(grid_3x3, ids, engine)
    grid = result.grid

    anchor = grid.cell_at(0, 0)
    assert anchor.id == ids[0]
    assert (anchor.row_span, anchor.col_span) == (2, 2)
    assert not anchor.hidden
    assert [grid.cell_at(r, c).hidden for r, c in [(0, 1), (1, 0), (1, 1)]] == [True] * 3

    others = [(0, 2), (1, 2), (2, 0), (2, 1), (2, 2)]
    for r, c in others:
        cell = grid.cell_at(r, c)
        assert cell == grid_3x3.cell_at(r, c)
        assert not cell.hidden

    assert result.selected_ids == [anchor.id]
    assert text_at(grid, 0, 0) == "A\nB\nD\nE"
    check_invariants(grid)


def test_merge_clears_hidden_content(merged_2x2, engine):
    for r, c in [(0, 1), (1, 0), (1, 1)]:
        assert engine.text_of(merged_2x2.cell_at(r, c).content) == ""


def test_merge_does_not_touch_prior_snapshot(grid_3x3, engine, text_at):
    ids = ids_at(grid_3x3, [(0, 0), (0, 1)])

    merged = merge_cells(grid_3x3, ids, engine).grid

    assert text_at(merged, 0, 0) == "A\nB"
    assert text_at(grid_3x3, 0, 0) == "A"
    assert text_at(grid_3x3, 0, 1) == "B"
    assert grid_3x3.cell_at(0, 1).hidden is False


def test_merge_anchor_is_row_major_first(grid_3x3, engine):
    """선택 순서와 관계없이 (row, col) 최소 셀이 기준 셀"""
    ids = ids_at(grid_3x3, [(2, 2), (2, 1), (1, 2), (1, 1)])

    grid = merge_cells(grid_3x3, ids, engine).grid

    assert grid.cell_at(1, 1).id == ids[3]
    assert (grid.cell_at(1, 1).row_span, grid.cell_at(1, 1).col_span) == (2, 2)
    assert engine.text_of(grid.cell_at(1, 1).content) == "E\nF\nH\nI"


def test_merge_single_row(grid_3x3, engine):
    grid = merge_cells(grid_3x3, ids_at(grid_3x3, [(2, 0), (2, 1), (2, 2)]), engine).grid

    assert (grid.cell_at(2, 0).row_span, grid.cell_at(2, 0).col_span) == (1, 3)
    check_invariants(grid)


def test_merge_requires_two_cells(grid_3x3, engine):
    ids = ids_at(grid_3x3, [(0, 0)])

    assert not can_merge(grid_3x3, ids)
    with pytest.raises(InvalidSelection):
        merge_cells(grid_3x3, ids, engine)


def test_merge_rejects_merged_cell(merged_2x2, engine):
    """이미 병합된 셀 포함 -> 먼저 분할해야 함"""
    ids = ids_at(merged_2x2, [(0, 0), (0, 2), (1, 2)])

    assert not can_merge(merged_2x2, ids)
    with pytest.raises(InvalidSelection, match="병합된 셀"):
        merge_cells(merged_2x2, ids, engine)


def test_merge_rejects_non_rectangular(grid_3x3, engine):
    """L자 선택은 병합 불가"""
    ids = ids_at(grid_3x3, [(0, 0), (0, 1), (1, 0)])

    assert not can_merge(grid_3x3, ids)
    with pytest.raises(InvalidSelection):
        merge_cells(grid_3x3, ids, engine)


def test_merge_rejects_hidden_cell(merged_2x2, engine):
    ids = ids_at(merged_2x2, [(1, 1), (1, 2)])

    with pytest.raises(InvalidSelection):
        merge_cells(merged_2x2, ids, engine)


def test_split_restores_spans(merged_2x2, engine, text_at):
    """분할: 병합 크기 1로 복원, 숨김 셀 빈 내용으로 다시 표시"""
    anchor_id = merged_2x2.cell_at(0, 0).id

    result = split_cells(merged_2x2, [anchor_id], engine)
    grid = result.grid

    assert all(not cell.hidden for cell in grid.cells())
    assert all((cell.row_span, cell.col_span) == (1, 1) for cell in grid.cells())
    assert text_at(grid, 0, 0) == "A\nB\nD\nE"
    assert [text_at(grid, r, c) for r, c in [(0, 1), (1, 0), (1, 1)]] == ["", "", ""]

    assert [(v.row_index, v.col_index) for v in result.selection] == [
        (0, 0), (0, 1), (1, 0), (1, 1)
    ]
    check_invariants(grid)


def test_merge_then_split_keeps_ids(grid_3x3, engine):
    """병합 후 분할해도 셀 id 집합은 그대로"""
    ids = ids_at(grid_3x3, [(0, 1), (0, 2), (1, 1), (1, 2), (2, 1), (2, 2)])
    merged = merge_cells(grid_3x3, ids, engine)

    split = split_cells(merged.grid, merged.selection, engine).grid

    assert {cell.id for cell in split.cells()} == {cell.id for cell in grid_3x3.cells()}
    assert all((cell.row_span, cell.col_span) == (1, 1) for cell in split.cells())


def test_split_without_merged_cell(grid_3x3, engine):
    ids = ids_at(grid_3x3, [(0, 0), (0, 1)])

    assert not can_split(grid_3x3, ids)
    with pytest.raises(InvalidSelection):
        split_cells(grid_3x3, ids, engine)


def test_split_keeps_other_selected_cells(merged_2x2, engine):
    ids = ids_at(merged_2x2, [(0, 0), (0, 2)])

    assert can_split(merged_2x2, ids)
    result = split_cells(merged_2x2, ids, engine)

    assert len(result.selection) == 5
    assert ids[1] in result.selected_ids
