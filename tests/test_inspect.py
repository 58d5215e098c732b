# -*- coding: utf-8 -*-
"""테이블 구조 출력 테스트"""

from formtable.table import create_grid, format_grid_structure, print_grid_structure


def test_format_merged_grid(merged_2x2, engine):
    lines = format_grid_structure(merged_2x2, engine)

    assert lines[0] == "크기: 3행 x 3열"
    assert lines[2] == "Row  0:  | A B D E(2x2) | ↓ | C"
    assert lines[3] == "Row  1:  | ↓ | ↓ | F"
    assert lines[4] == "Row  2:  | G | H | I"


def test_format_empty_cells_and_row_limit(engine):
    grid = create_grid(3, 1, engine)

    lines = format_grid_structure(grid, engine, max_rows=2)

    assert lines[2:] == ["Row  0:  | (empty)", "Row  1:  | (empty)", "... (1행 더 있음)"]


def test_print_grid_structure(merged_2x2, engine, capsys):
    print_grid_structure(merged_2x2, engine)

    out = capsys.readouterr().out
    assert "Row  1:  | ↓ | ↓ | F" in out
