# -*- coding: utf-8 -*-
"""
테이블 편집 예외 정의

- InvalidSelection: 선택 영역이 작업 조건을 만족하지 않음 (복구 가능)
- OutOfRangeEdit: 행/열 인덱스가 범위를 벗어남 (복구 가능)
- InvariantViolation: 그리드 불변 조건 위반 (치명적, 프로그래밍 오류)
"""


class FormTableError(Exception):
    """테이블 편집 예외 기본 클래스"""


class InvalidSelection(FormTableError, ValueError):
    """병합/분할 등을 적용할 수 없는 선택 영역"""


class OutOfRangeEdit(FormTableError, IndexError):
    """범위를 벗어난 행/열 삽입 또는 삭제"""


class InvariantViolation(FormTableError, RuntimeError):
    """
    그리드 불변 조건 위반

    선택 영역 확장이 수렴하지 않거나 병합 영역이 겹치는 경우.
    호출 측은 이 예외가 발생한 트랜잭션의 결과를 반영하면 안 됩니다.
    """
