# -*- coding: utf-8 -*-
"""그리드 → Excel 변환 테스트"""

from dataclasses import replace

import pytest
from openpyxl import Workbook, load_workbook

from formtable.config_loader import ExcelExportConfig
from formtable.core.unit import Unit
from formtable.excel import ExcelStyler, GridToExcel, convert_grid_to_excel
from formtable.excel.grid_to_excel import main
from formtable.table import dumps, set_cell_borders, set_cell_style, set_column_width

from conftest import ids_at


@pytest.fixture
def excel_config():
    return ExcelExportConfig()


def test_convert_merged_grid(merged_2x2, engine, excel_config, tmp_path):
    output = tmp_path / "table.xlsx"

    result = GridToExcel(config=excel_config, engine=engine).convert(merged_2x2, output)

    assert result == output
    ws = load_workbook(output).active
    assert ws.title == "FormTable"
    assert [str(r) for r in ws.merged_cells.ranges] == ["A1:B2"]
    assert ws["A1"].value == "A\nB\nD\nE"
    assert ws["C1"].value == "C"
    assert ws["C3"].value == "I"
    assert ws.column_dimensions["A"].width == pytest.approx(Unit.px_to_excel_width(200))
    assert ws.row_dimensions[1].height == pytest.approx(20)


def test_convert_styles(grid_3x3, engine, excel_config, tmp_path):
    grid = set_cell_style(grid_3x3, ids_at(grid_3x3, [(0, 2)]), {'background': '#ff0000'})
    grid = set_cell_borders(grid, ids_at(grid, [(2, 0)]), 'all')
    grid = set_column_width(grid, grid.col_headers[1].id, 75)
    output = tmp_path / "styled.xlsx"

    convert_grid_to_excel(grid, output, engine=engine, config=excel_config)

    ws = load_workbook(output).active
    assert ws["C1"].fill.fill_type == "solid"
    assert ws["C1"].fill.start_color.rgb.endswith("FF0000")
    assert ws["A3"].border.left.style == "thin"
    assert ws["A3"].border.bottom.style == "thin"
    assert ws["B3"].border.left.style is None
    assert ws.column_dimensions["B"].width == pytest.approx(Unit.px_to_excel_width(75))


def test_merged_region_outer_borders(merged_2x2, engine, excel_config):
    """병합 영역은 외곽 테두리만"""
    grid = set_cell_borders(merged_2x2, ids_at(merged_2x2, [(0, 0)]), 'all')
    ws = Workbook().active

    rows_used = GridToExcel(config=excel_config, engine=engine).place_grid(ws, grid)

    assert rows_used == 3
    assert ws["A1"].border.top.style == "thin"
    assert ws["A1"].border.left.style == "thin"
    assert ws["B2"].border.right.style == "thin"
    assert ws["B2"].border.bottom.style == "thin"
    assert ws["A1"].border.right.style is None


def test_row_height_from_px(grid_3x3, engine, excel_config, tmp_path):
    rows = list(grid_3x3.rows)
    rows[0] = replace(rows[0], height=40)
    grid = grid_3x3.with_rows(rows)
    output = tmp_path / "height.xlsx"

    GridToExcel(config=excel_config, engine=engine).convert(grid, output)

    ws = load_workbook(output).active
    assert ws.row_dimensions[1].height == pytest.approx(30)


def test_css_color_to_rgb():
    styler = ExcelStyler()

    assert styler.css_color_to_rgb('#f00') == 'FF0000'
    assert styler.css_color_to_rgb('#00ff7f') == '00FF7F'
    assert styler.css_color_to_rgb('rgb(0, 128, 255)') == '0080FF'
    assert styler.css_color_to_rgb('Red') == 'FF0000'
    assert styler.css_color_to_rgb('not-a-color') is None
    assert styler.css_color_to_rgb(None) is None


def test_cli(merged_2x2, engine, tmp_path):
    snapshot = tmp_path / "snapshot.json"
    snapshot.write_text(dumps(merged_2x2, engine), encoding='utf-8')
    output = tmp_path / "cli.xlsx"

    assert main([str(snapshot), "-o", str(output)]) == 0

    ws = load_workbook(output).active
    assert [str(r) for r in ws.merged_cells.ranges] == ["A1:B2"]


def test_cli_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1
