# -*- coding: utf-8 -*-
"""Excel 셀 스타일 적용 모듈"""

import re
from typing import Optional

from openpyxl.worksheet.worksheet import Worksheet
from openpyxl.styles import Border, Side, PatternFill, Alignment

from ..config_loader import ExcelExportConfig
from ..table.models import CellData


class ExcelStyler:
    """그리드 셀 -> Excel 셀 스타일 적용 클래스"""

    # CSS 색상 이름 -> RGB hex (자주 쓰는 색상만)
    NAMED_COLORS = {
        'black': '000000',
        'white': 'FFFFFF',
        'red': 'FF0000',
        'green': '008000',
        'blue': '0000FF',
        'yellow': 'FFFF00',
        'orange': 'FFA500',
        'gray': '808080',
        'grey': '808080',
        'lightgray': 'D3D3D3',
        'lightgrey': 'D3D3D3',
        'silver': 'C0C0C0',
        'purple': '800080',
        'pink': 'FFC0CB',
        'cyan': '00FFFF',
        'magenta': 'FF00FF',
    }

    _RGB_PATTERN = re.compile(r'^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)')

    def __init__(self, config: Optional[ExcelExportConfig] = None):
        self.config = config if config is not None else ExcelExportConfig()

    def css_color_to_rgb(self, color_str: Optional[str]) -> Optional[str]:
        """CSS 색상 문자열을 RGB hex로 변환 (#RGB, #RRGGBB, rgb(r,g,b), 색상 이름)"""
        if not color_str:
            return None
        color_str = str(color_str).strip().lower()

        if color_str.startswith('#'):
            value = color_str[1:]
            if len(value) == 3:
                value = ''.join(ch * 2 for ch in value)
            if len(value) == 6 and all(ch in '0123456789abcdef' for ch in value):
                return value.upper()
            return None

        match = self._RGB_PATTERN.match(color_str)
        if match:
            r, g, b = (min(int(v), 255) for v in match.groups())
            return f"{r:02X}{g:02X}{b:02X}"

        return self.NAMED_COLORS.get(color_str)

    def get_border_side(self, enabled: bool) -> Side:
        """테두리 방향 사용 여부를 openpyxl Side로 변환"""
        if enabled:
            return Side(style=self.config.border_style, color=self.config.border_color)
        return Side(style=None)

    def apply_cell_style(self, excel_cell, cell: CellData):
        """병합 기준 셀 스타일 적용 (테두리, 배경색, 정렬)"""
        directions = {b.direction for b in cell.borders}
        excel_cell.border = Border(
            left=self.get_border_side('left' in directions),
            right=self.get_border_side('right' in directions),
            top=self.get_border_side('top' in directions),
            bottom=self.get_border_side('bottom' in directions),
        )

        bg_color = self.css_color_to_rgb((cell.style or {}).get('background'))
        if bg_color and bg_color != 'FFFFFF':
            excel_cell.fill = PatternFill(start_color=bg_color, end_color=bg_color, fill_type='solid')

        excel_cell.alignment = Alignment(horizontal='left', vertical='top', wrap_text=True)

    def apply_merged_cell_borders(
        self, ws: Worksheet, cell: CellData,
        start_row: int, start_col: int, end_row: int, end_col: int
    ):
        """병합된 셀 영역의 테두리 적용 (외곽만 유지, 내부 제거)"""
        # 병합 영역이 1x1이면 적용 불필요
        if start_row == end_row and start_col == end_col:
            return

        directions = {b.direction for b in cell.borders}
        if not directions:
            return

        for r in range(start_row, end_row + 1):
            for c in range(start_col, end_col + 1):
                ws.cell(row=r, column=c).border = Border(
                    left=self.get_border_side('left' in directions and c == start_col),
                    right=self.get_border_side('right' in directions and c == end_col),
                    top=self.get_border_side('top' in directions and r == start_row),
                    bottom=self.get_border_side('bottom' in directions and r == end_row),
                )
