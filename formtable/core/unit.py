# -*- coding: utf-8 -*-
"""
픽셀 단위 변환 유틸리티

테이블 열 너비는 화면 픽셀(px, 96 DPI) 기준으로 저장됩니다.
- 1 inch = 96 px = 72 pt
- 1 pt ≈ 1.333 px
- Excel 열 너비 1 문자 ≈ 7 px (Calibri 11pt 기준, 여백 5px)
"""


class Unit:
    """단위 변환 상수 및 메서드"""

    # 기본 변환 상수
    PX_PER_INCH = 96
    PT_PER_INCH = 72
    PX_PER_PT = 96 / 72  # ≈ 1.333

    # Excel 변환용
    EXCEL_PX_PER_CHAR = 7
    EXCEL_CELL_PADDING_PX = 5

    # ========================================
    # px ↔ 포인트
    # ========================================

    @staticmethod
    def px_to_pt(px: float) -> float:
        """px -> 포인트"""
        return px / Unit.PX_PER_PT

    @staticmethod
    def pt_to_px(pt: float) -> int:
        """포인트 -> px"""
        return int(round(pt * Unit.PX_PER_PT))

    # ========================================
    # px ↔ inch
    # ========================================

    @staticmethod
    def px_to_inch(px: float) -> float:
        """px -> inch"""
        return px / Unit.PX_PER_INCH

    # ========================================
    # Excel 변환
    # ========================================

    @staticmethod
    def px_to_excel_width(px: float, px_per_char: float = EXCEL_PX_PER_CHAR) -> float:
        """px -> Excel 열 너비 (문자 단위)"""
        width = (px - Unit.EXCEL_CELL_PADDING_PX) / px_per_char
        return round(max(width, 1.0), 2)

    @staticmethod
    def excel_width_to_px(width: float, px_per_char: float = EXCEL_PX_PER_CHAR) -> int:
        """Excel 열 너비 -> px"""
        return int(round(width * px_per_char + Unit.EXCEL_CELL_PADDING_PX))
