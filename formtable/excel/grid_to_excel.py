# -*- coding: utf-8 -*-
"""
폼 테이블 그리드 → Excel 변환 모듈

그리드 위치 하나가 Excel 셀 하나에 대응합니다.
- 표시 셀: 텍스트 + 스타일, 병합 셀은 merge_cells로 병합 영역 생성
- 숨김 셀: 병합 영역에 포함 (값 없음)
- 열 너비: px → Excel 문자 단위
- 행 높이: 행 높이(px)가 있으면 pt로 변환, 없으면 설정 기본값

사용 예:
    converter = GridToExcel()
    converter.convert(grid, "output.xlsx")
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet
from openpyxl.utils import get_column_letter

from ..config import get_logger, setup_logging
from ..config_loader import ExcelExportConfig, load_table_config
from ..core.unit import Unit
from ..table.content import ContentEngine, resolve_engine
from ..table.models import CellData, GridSnapshot
from ..table.serializer import loads
from .styles import ExcelStyler


logger = get_logger('excel')


class GridToExcel:
    """
    GridSnapshot을 Excel 워크시트로 변환

    사용 예:
        converter = GridToExcel()
        converter.convert(grid, "output.xlsx")

        # 기존 워크시트에 배치
        converter.place_grid(ws, grid, start_row=3)
    """

    def __init__(self, config: Optional[ExcelExportConfig] = None, engine: Optional[ContentEngine] = None):
        self.config = config if config is not None else load_table_config().excel
        self.engine = resolve_engine(engine)
        self.styler = ExcelStyler(self.config)

    def cell_text(self, cell: CellData) -> str:
        """셀 내용을 Excel 값으로 쓸 텍스트로 변환"""
        text_of = getattr(self.engine, 'text_of', None)
        if text_of is not None:
            return text_of(cell.content)
        return ""

    def apply_dimensions(self, ws: Worksheet, grid: GridSnapshot, start_row: int = 1, start_col: int = 1):
        """열 너비 / 행 높이 적용"""
        for offset, header in enumerate(grid.col_headers):
            col_letter = get_column_letter(start_col + offset)
            ws.column_dimensions[col_letter].width = Unit.px_to_excel_width(
                header.width, self.config.px_per_char
            )

        for offset, row in enumerate(grid.rows):
            if row.height:
                height_pt = round(Unit.px_to_pt(row.height), 2)
            else:
                height_pt = self.config.row_height_pt
            ws.row_dimensions[start_row + offset].height = height_pt

    def place_grid(self, ws: Worksheet, grid: GridSnapshot, start_row: int = 1, start_col: int = 1) -> int:
        """
        워크시트의 지정 위치에 그리드 배치

        Args:
            ws: 대상 워크시트
            grid: 테이블 스냅샷
            start_row: 시작 행 (1-based)
            start_col: 시작 열 (1-based)

        Returns:
            사용한 행 수
        """
        self.apply_dimensions(ws, grid, start_row, start_col)

        merged = 0
        for cell in grid.anchors():
            excel_row = start_row + cell.row_index
            excel_col = start_col + cell.col_index

            excel_cell = ws.cell(row=excel_row, column=excel_col)
            text = self.cell_text(cell)
            if text:
                excel_cell.value = text
            self.styler.apply_cell_style(excel_cell, cell)

            if not cell.is_merged:
                continue

            # 테이블 범위를 넘는 병합 영역은 잘라서 병합
            end_row = start_row + min(cell.end_row, grid.row_count - 1)
            end_col = start_col + min(cell.end_col, grid.col_count - 1)
            if end_row == excel_row and end_col == excel_col:
                continue

            ws.merge_cells(
                start_row=excel_row,
                start_column=excel_col,
                end_row=end_row,
                end_column=end_col,
            )
            self.styler.apply_merged_cell_borders(ws, cell, excel_row, excel_col, end_row, end_col)
            merged += 1

        logger.debug(f"그리드 배치: {grid.row_count}행 x {grid.col_count}열, 병합 영역 {merged}개")
        return grid.row_count

    def convert(
        self,
        grid: GridSnapshot,
        output_path: Union[str, Path],
        sheet_title: Optional[str] = None,
    ) -> Path:
        """
        그리드를 새 Excel 파일로 저장

        Args:
            grid: 테이블 스냅샷
            output_path: 출력 Excel 경로
            sheet_title: 시트 이름 (None이면 설정값)

        Returns:
            생성된 Excel 파일 경로
        """
        output_path = Path(output_path)

        wb = Workbook()
        ws = wb.active
        title = sheet_title or self.config.sheet_title
        ws.title = title[:31]

        self.place_grid(ws, grid)

        wb.save(output_path)
        logger.info(f"Excel 저장: {output_path} ({grid.row_count}행 x {grid.col_count}열)")
        return output_path


# ============================================================
# 편의 함수
# ============================================================

def convert_grid_to_excel(
    grid: GridSnapshot,
    output_path: Union[str, Path],
    engine: Optional[ContentEngine] = None,
    config: Optional[ExcelExportConfig] = None,
) -> Path:
    """
    그리드를 Excel로 변환

    Args:
        grid: 테이블 스냅샷
        output_path: 출력 Excel 경로
        engine: 셀 텍스트 추출에 사용할 엔진
        config: Excel 내보내기 설정

    Returns:
        생성된 Excel 파일 경로
    """
    converter = GridToExcel(config=config, engine=engine)
    return converter.convert(grid, output_path)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="폼 테이블 스냅샷(JSON)을 Excel로 변환",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  python -m formtable.excel.grid_to_excel snapshot.json
  python -m formtable.excel.grid_to_excel snapshot.json -o table.xlsx --config table_config.yaml
"""
    )

    parser.add_argument("snapshot", help="스냅샷 JSON 파일 경로")
    parser.add_argument("-o", "--output", help="출력 Excel 경로 (기본: 입력 파일명.xlsx)")
    parser.add_argument("--config", help="YAML 설정 파일 경로")
    parser.add_argument("-v", "--verbose", action="store_true", help="디버그 로그 출력")

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    snapshot_path = Path(args.snapshot)
    if not snapshot_path.exists():
        print(f"[ERROR] 파일을 찾을 수 없습니다: {snapshot_path}", file=sys.stderr)
        return 1

    output_path = Path(args.output) if args.output else snapshot_path.with_suffix('.xlsx')
    config = load_table_config(args.config)

    grid = loads(snapshot_path.read_text(encoding='utf-8'))
    GridToExcel(config=config.excel).convert(grid, output_path)
    print(f"완료: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
