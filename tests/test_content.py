# -*- coding: utf-8 -*-
"""중첩 문서 엔진 / 공통 유틸리티 테스트"""

import json

import pytest

from formtable.config import DEFAULT_EDITOR_STATE_STRING
from formtable.core import Unit, uid


def test_empty_content_is_default_state(engine):
    handle = engine.create_empty_content()

    assert engine.serialize(handle) == json.loads(DEFAULT_EDITOR_STATE_STRING)
    assert len(engine.read_content(handle)) == 1
    assert engine.text_of(handle) == ""


def test_concat_content_builds_new_handle(engine):
    first = engine.create_text_content("첫 줄")
    second = engine.create_text_content("둘째 줄")

    merged = engine.concat_content([first, None, second])

    assert merged is not first and merged is not second
    assert engine.text_of(merged) == "첫 줄\n둘째 줄"
    assert engine.text_of(first) == "첫 줄"
    assert len(engine.read_content(merged)) == 2


def test_read_content_is_a_copy(engine):
    handle = engine.create_text_content("A")

    blocks = engine.read_content(handle)
    blocks[0]['children'][0]['text'] = "changed"

    assert engine.text_of(handle) == "A"


def test_deserialize(engine):
    handle = engine.create_text_content("저장")
    state = engine.serialize(handle)

    assert engine.text_of(engine.deserialize(state)) == "저장"
    assert engine.text_of(engine.deserialize(json.dumps(state))) == "저장"
    assert engine.read_content(engine.deserialize(None)) == engine.read_content(
        engine.create_empty_content()
    )
    assert engine.serialize(None) is None


def test_unit_conversion():
    assert Unit.px_to_pt(96) == pytest.approx(72)
    assert Unit.pt_to_px(72) == 96
    assert Unit.px_to_inch(192) == 2
    assert Unit.px_to_excel_width(75) == 10
    assert Unit.px_to_excel_width(1) == 1.0
    assert Unit.excel_width_to_px(10) == 75


def test_uid():
    values = {uid() for _ in range(100)}

    assert len(values) == 100
    assert uid("cell-").startswith("cell-")
