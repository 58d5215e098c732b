# -*- coding: utf-8 -*-
"""
셀 중첩 문서(content) 인터페이스

그리드 엔진은 셀 내용을 해석하지 않고 다음 연산만 사용합니다.
- create_empty_content: 빈 문서 생성 (분할, 행/열 삽입)
- read_content: 문서의 블록 목록 읽기 (병합 시 내용 이어붙이기)
- set_content: 문서의 블록 목록 교체 (병합 기준 셀)
- serialize / deserialize: 저장용 stateData 변환

사용 예:
    engine = DocumentContentEngine()
    handle = engine.create_empty_content()
    engine.set_content(handle, [{"type": "paragraph", "children": []}])
"""

import copy
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..config import DEFAULT_EDITOR_STATE_STRING


class ContentEngine(ABC):
    """
    중첩 문서 엔진 인터페이스

    호스트 리치 텍스트 엔진이 구현합니다.
    핸들 하나는 항상 셀 하나에만 속합니다.
    """

    @abstractmethod
    def create_empty_content(self) -> Any:
        """빈 문서 핸들 생성"""
        pass

    @abstractmethod
    def read_content(self, handle: Any) -> List[Dict[str, Any]]:
        """문서의 최상위 블록 목록"""
        pass

    @abstractmethod
    def set_content(self, handle: Any, blocks: List[Dict[str, Any]]) -> None:
        """문서의 최상위 블록 목록 교체"""
        pass

    @abstractmethod
    def serialize(self, handle: Any) -> Optional[Dict[str, Any]]:
        """저장용 stateData로 변환"""
        pass

    @abstractmethod
    def deserialize(self, state_data: Optional[Dict[str, Any]]) -> Any:
        """stateData에서 새 핸들 생성"""
        pass

    def concat_content(self, handles: List[Any]) -> Any:
        """
        여러 문서의 블록을 순서대로 이어붙인 새 핸들 생성

        원본 핸들은 변경하지 않습니다.
        """
        blocks: List[Dict[str, Any]] = []
        for handle in handles:
            if handle is not None:
                blocks.extend(self.read_content(handle))
        merged = self.create_empty_content()
        self.set_content(merged, blocks)
        return merged


class NestedDocument:
    """중첩 문서 상태 ({"root": {"children": [...]}})"""

    __slots__ = ('state',)

    def __init__(self, state: Optional[Dict[str, Any]] = None):
        self.state = state if state is not None else json.loads(DEFAULT_EDITOR_STATE_STRING)

    @property
    def children(self) -> List[Dict[str, Any]]:
        return self.state.get('root', {}).get('children', [])

    def __repr__(self) -> str:
        return f"NestedDocument(blocks={len(self.children)})"


class DocumentContentEngine(ContentEngine):
    """
    기본 중첩 문서 엔진

    핸들은 NestedDocument이며 상태는 JSON 호환 딕셔너리입니다.
    """

    def __init__(self, default_state: str = DEFAULT_EDITOR_STATE_STRING):
        self._default_state = default_state

    def _default(self) -> Dict[str, Any]:
        return json.loads(self._default_state)

    def create_empty_content(self) -> NestedDocument:
        return NestedDocument(self._default())

    def read_content(self, handle: NestedDocument) -> List[Dict[str, Any]]:
        if handle is None:
            return []
        return copy.deepcopy(handle.children)

    def set_content(self, handle: NestedDocument, blocks: List[Dict[str, Any]]) -> None:
        # 기본 상태 위에 children만 교체
        state = self._default()
        state['root']['children'] = copy.deepcopy(list(blocks))
        handle.state = state

    def serialize(self, handle: NestedDocument) -> Optional[Dict[str, Any]]:
        if handle is None:
            return None
        return copy.deepcopy(handle.state)

    def deserialize(self, state_data: Optional[Dict[str, Any]]) -> NestedDocument:
        if not state_data:
            return self.create_empty_content()
        if isinstance(state_data, str):
            state_data = json.loads(state_data)
        return NestedDocument(copy.deepcopy(state_data))

    # ========== 텍스트 헬퍼 ==========

    @staticmethod
    def text_of(handle: NestedDocument) -> str:
        """문서의 텍스트 노드를 줄 단위로 이어붙임"""
        if handle is None:
            return ""

        def collect(node: Dict[str, Any]) -> str:
            if 'text' in node:
                return str(node['text'])
            return "".join(collect(child) for child in node.get('children', []))

        return "\n".join(collect(block) for block in handle.children).strip()

    def create_text_content(self, text: str) -> NestedDocument:
        """텍스트 한 문단으로 구성된 문서 생성"""
        handle = self.create_empty_content()
        paragraph = {
            "children": [
                {
                    "detail": 0,
                    "format": 0,
                    "mode": "normal",
                    "style": "",
                    "text": text,
                    "type": "text",
                    "version": 1,
                }
            ] if text else [],
            "direction": None,
            "format": "",
            "indent": 0,
            "type": "paragraph",
            "version": 1,
        }
        self.set_content(handle, [paragraph])
        return handle


def resolve_engine(engine: Optional[ContentEngine]) -> ContentEngine:
    """엔진이 지정되지 않으면 기본 엔진 사용"""
    return engine if engine is not None else DocumentContentEngine()
