# -*- coding: utf-8 -*-
"""행/열/셀 고유 ID 생성"""

import uuid


def uid(prefix: str = "") -> str:
    """재사용되지 않는 고유 ID 생성 (uuid4 기반)"""
    return f"{prefix}{uuid.uuid4().hex}"
