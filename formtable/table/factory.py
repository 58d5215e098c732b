# -*- coding: utf-8 -*-
"""테이블 생성 (rows x cols, 병합 없음, 빈 내용)"""

from typing import Optional

from ..config import DEFAULT_CELL_WIDTH, get_logger
from ..core.uid import uid
from .content import ContentEngine, resolve_engine
from .models import CellData, ColHeader, GridSnapshot, RowItem


logger = get_logger('factory')


def create_grid(
    rows: int,
    cols: int,
    engine: Optional[ContentEngine] = None,
    width: Optional[int] = None,
    bg_color: Optional[str] = None,
) -> GridSnapshot:
    """
    새 테이블 생성

    Args:
        rows: 행 수
        cols: 열 수
        engine: 중첩 문서 엔진 (None이면 기본 엔진)
        width: 열 너비 (px, None이면 기본 너비)
        bg_color: 테이블 배경색

    Returns:
        rows x cols 크기의 GridSnapshot
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"행/열 수는 0 이상이어야 합니다: {rows}x{cols}")

    engine = resolve_engine(engine)
    col_width = width if width is not None else DEFAULT_CELL_WIDTH

    headers = tuple(ColHeader(id=uid(), width=col_width) for _ in range(cols))
    row_items = tuple(
        RowItem(
            id=uid(),
            cells=tuple(
                CellData(
                    id=uid(),
                    row_index=r,
                    col_index=c,
                    content=engine.create_empty_content(),
                )
                for c in range(cols)
            ),
        )
        for r in range(rows)
    )

    logger.debug(f"테이블 생성: {rows}행 x {cols}열")
    return GridSnapshot(col_headers=headers, rows=row_items, bg_color=bg_color)
