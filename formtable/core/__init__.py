# -*- coding: utf-8 -*-
"""
core 모듈 - 공통 클래스 및 유틸리티

단위 변환, ID 생성 등 프로젝트 전체에서 사용되는 공통 코드
"""

from .unit import Unit
from .uid import uid

__all__ = [
    'Unit',
    'uid',
]
