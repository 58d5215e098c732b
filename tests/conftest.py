# -*- coding: utf-8 -*-
"""
공통 테스트 픽스처

grid_3x3:
+---+---+---+
| A | B | C |
+---+---+---+
| D | E | F |
+---+---+---+
| G | H | I |
+---+---+---+

merged_2x2 (grid_3x3에서 A, B, D, E 병합):
+-------+---+
|       | C |
| A..E  +---+
| (2x2) | F |
+---+---+---+
| G | H | I |
+---+---+---+
"""

from dataclasses import replace

import pytest

from formtable.config_loader import TableConfig
from formtable.table import DocumentContentEngine, create_grid, merge_cells


LABELS = [
    ['A', 'B', 'C'],
    ['D', 'E', 'F'],
    ['G', 'H', 'I'],
]


def fill_text(grid, engine, labels):
    """셀마다 텍스트 한 문단 설정"""
    updates = {}
    for r, row in enumerate(grid.rows):
        for c, cell in enumerate(row.cells):
            updates[cell.id] = replace(cell, content=engine.create_text_content(labels[r][c]))
    return grid.replace_cells(updates)


def ids_at(grid, positions):
    """(row, col) 위치 목록 -> 셀 id 목록"""
    return [grid.cell_at(r, c).id for r, c in positions]


@pytest.fixture
def engine():
    return DocumentContentEngine()


@pytest.fixture
def config():
    """파일을 읽지 않는 기본 설정 (불변 조건 검사 활성화)"""
    return TableConfig(strict_invariants=True)


@pytest.fixture
def grid_3x3(engine):
    return fill_text(create_grid(3, 3, engine), engine, LABELS)


@pytest.fixture
def merged_2x2(grid_3x3, engine):
    ids = ids_at(grid_3x3, [(0, 0), (0, 1), (1, 0), (1, 1)])
    return merge_cells(grid_3x3, ids, engine).grid


@pytest.fixture
def text_at(engine):
    """위치의 셀 텍스트"""
    def _text_at(grid, row, col):
        return engine.text_of(grid.cell_at(row, col).content)
    return _text_at
