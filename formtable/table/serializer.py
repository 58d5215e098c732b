# -*- coding: utf-8 -*-
"""
테이블 스냅샷 저장/복원

저장 형식 (JSON 호환 딕셔너리):
    {
        "bgColor": "...",              (선택)
        "colHeaders": [{"id": "...", "width": 200}],
        "rows": [
            {
                "id": "...",
                "height": 40,          (선택)
                "cells": [
                    {
                        "id": "...", "rowIndex": 0, "colIndex": 0,
                        "rowSpan": 2, "colSpan": 2,   (1이면 생략)
                        "hidden": true,               (false면 생략)
                        "style": {...},               (선택)
                        "borders": [{"direction": "left"}],  (선택)
                        "stateData": {...}
                    }
                ]
            }
        ]
    }

복원 시 위치/병합/숨김 필드는 그대로 사용하고, 셀 내용은 stateData에서 새 핸들로 만듭니다.
"""

import json
from typing import Any, Dict, Optional

from ..config import DEFAULT_CELL_WIDTH, get_logger
from .content import ContentEngine, resolve_engine
from .models import CellBorder, CellData, ColHeader, GridSnapshot, RowItem


logger = get_logger('serializer')


def _export_cell(cell: CellData, engine: ContentEngine) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        'id': cell.id,
        'rowIndex': cell.row_index,
        'colIndex': cell.col_index,
    }
    if cell.row_span != 1:
        data['rowSpan'] = cell.row_span
    if cell.col_span != 1:
        data['colSpan'] = cell.col_span
    if cell.hidden:
        data['hidden'] = True
    if cell.style:
        data['style'] = dict(cell.style)
    if cell.borders:
        data['borders'] = [{'direction': b.direction} for b in cell.borders]
    data['stateData'] = engine.serialize(cell.content)
    return data


def export_snapshot(grid: GridSnapshot, engine: Optional[ContentEngine] = None) -> Dict[str, Any]:
    """
    스냅샷을 저장용 딕셔너리로 변환

    Args:
        grid: 테이블 스냅샷
        engine: 셀 내용 직렬화에 사용할 엔진

    Returns:
        JSON 호환 딕셔너리
    """
    engine = resolve_engine(engine)

    data: Dict[str, Any] = {}
    if grid.bg_color:
        data['bgColor'] = grid.bg_color

    data['colHeaders'] = [{'id': h.id, 'width': h.width} for h in grid.col_headers]

    rows = []
    for row in grid.rows:
        item: Dict[str, Any] = {'id': row.id}
        if row.height is not None:
            item['height'] = row.height
        item['cells'] = [_export_cell(cell, engine) for cell in row.cells]
        rows.append(item)
    data['rows'] = rows

    return data


def _import_cell(data: Dict[str, Any], row: int, col: int, engine: ContentEngine) -> CellData:
    borders = tuple(
        CellBorder(direction=b['direction'] if isinstance(b, dict) else str(b))
        for b in data.get('borders') or ()
    )
    style = data.get('style')
    return CellData(
        id=data['id'],
        row_index=data.get('rowIndex', row),
        col_index=data.get('colIndex', col),
        row_span=data.get('rowSpan', 1),
        col_span=data.get('colSpan', 1),
        hidden=bool(data.get('hidden', False)),
        content=engine.deserialize(data.get('stateData')),
        style=dict(style) if style else None,
        borders=borders,
    )


def import_snapshot(data: Dict[str, Any], engine: Optional[ContentEngine] = None) -> GridSnapshot:
    """
    저장용 딕셔너리에서 스냅샷 복원

    Args:
        data: export_snapshot 형식의 딕셔너리
        engine: 셀 내용 복원에 사용할 엔진

    Returns:
        GridSnapshot (셀 내용은 새 핸들)

    Raises:
        ValueError: 필수 필드(id)가 없는 경우
    """
    engine = resolve_engine(engine)

    headers = []
    for i, header in enumerate(data.get('colHeaders') or ()):
        if 'id' not in header:
            raise ValueError(f"열 헤더 {i}에 id가 없습니다")
        headers.append(ColHeader(id=header['id'], width=header.get('width') or DEFAULT_CELL_WIDTH))

    rows = []
    for r, row in enumerate(data.get('rows') or ()):
        if 'id' not in row:
            raise ValueError(f"행 {r}에 id가 없습니다")
        cells = []
        for c, cell in enumerate(row.get('cells') or ()):
            if 'id' not in cell:
                raise ValueError(f"셀 ({r}, {c})에 id가 없습니다")
            cells.append(_import_cell(cell, r, c, engine))
        rows.append(RowItem(id=row['id'], cells=tuple(cells), height=row.get('height')))

    grid = GridSnapshot(col_headers=tuple(headers), rows=tuple(rows), bg_color=data.get('bgColor'))
    logger.debug(f"스냅샷 복원: {grid.row_count}행 x {grid.col_count}열")
    return grid


def dumps(grid: GridSnapshot, engine: Optional[ContentEngine] = None, indent: Optional[int] = None) -> str:
    """스냅샷을 JSON 문자열로 변환"""
    return json.dumps(export_snapshot(grid, engine), ensure_ascii=False, indent=indent)


def loads(text: str, engine: Optional[ContentEngine] = None) -> GridSnapshot:
    """JSON 문자열에서 스냅샷 복원"""
    return import_snapshot(json.loads(text), engine)
