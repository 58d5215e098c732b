# -*- coding: utf-8 -*-
"""테이블 구조 텍스트 출력 (디버깅용)"""

from typing import List, Optional

from .content import ContentEngine, resolve_engine
from .models import CellData, GridSnapshot


def _cell_text(cell: CellData, engine: ContentEngine) -> str:
    text_of = getattr(engine, 'text_of', None)
    if text_of is not None:
        return text_of(cell.content)

    # 텍스트 헬퍼가 없는 엔진은 블록 수만 표시
    blocks = engine.read_content(cell.content) if cell.content is not None else []
    return f"<{len(blocks)} blocks>" if blocks else ""


def format_grid_structure(
    grid: GridSnapshot,
    engine: Optional[ContentEngine] = None,
    max_rows: int = 20,
    max_text: int = 10,
) -> List[str]:
    """
    테이블 구조를 텍스트 줄 목록으로 변환

    표시 규칙:
    - 표시 셀: 텍스트(없으면 (empty)) + 병합 크기 (예: 제목(2x2))
    - 숨김 셀: ↓
    - 셀 없음: -
    """
    engine = resolve_engine(engine)

    lines = [
        f"크기: {grid.row_count}행 x {grid.col_count}열",
        "",
    ]

    for r in range(min(grid.row_count, max_rows)):
        row_str = f"Row {r:2d}: "
        for c in range(grid.col_count):
            cell = grid.cell_at(r, c)
            if cell is None:
                row_str += " | -"
            elif cell.hidden:
                row_str += " | ↓"
            else:
                text = _cell_text(cell, engine).replace("\n", " ")
                text = text[:max_text] + "..." if len(text) > max_text else text
                span = f"({cell.row_span}x{cell.col_span})" if cell.is_merged else ""
                row_str += f" | {text or '(empty)'}{span}"
        lines.append(row_str)

    if grid.row_count > max_rows:
        lines.append(f"... ({grid.row_count - max_rows}행 더 있음)")

    return lines


def print_grid_structure(grid: GridSnapshot, engine: Optional[ContentEngine] = None, max_rows: int = 20):
    """테이블 구조 출력"""
    for line in format_grid_structure(grid, engine, max_rows=max_rows):
        print(line)
