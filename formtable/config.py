# -*- coding: utf-8 -*-
"""
프로젝트 설정 및 경로 관리

환경변수 또는 기본값을 통해 경로와 기본 상수를 설정합니다.
"""

import os
import logging
from pathlib import Path


# ============================================================
# 기본 경로 설정
# ============================================================

# 패키지 디렉토리
PACKAGE_DIR = Path(__file__).parent.resolve()

# 프로젝트 루트 디렉토리
PROJECT_ROOT = PACKAGE_DIR.parent

# 모듈 디렉토리
TABLE_MODULE_DIR = PACKAGE_DIR / 'table'
EXCEL_MODULE_DIR = PACKAGE_DIR / 'excel'
CORE_MODULE_DIR = PACKAGE_DIR / 'core'
TESTS_DIR = PROJECT_ROOT / 'tests'

# 기본 설정 파일 (환경변수로 변경 가능)
DEFAULT_CONFIG_PATH = PACKAGE_DIR / 'table_config.yaml'
CONFIG_ENV_VAR = 'FORMTABLE_CONFIG'


def get_config_path() -> Path:
    """설정 파일 경로 (FORMTABLE_CONFIG 환경변수 우선)"""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


# ============================================================
# 테이블 기본값
# ============================================================

# 열 너비 (px)
DEFAULT_CELL_WIDTH = 200
MIN_CELL_WIDTH = 50

# 선택 영역 확장 반복 상한
MAX_EXPAND_ITERATIONS = 10000

# 빈 중첩 문서 (빈 문단 1개)
DEFAULT_EDITOR_STATE_STRING = (
    '{"root":{"children":[{"children":[],"direction":null,"format":"","indent":0,'
    '"type":"paragraph","version":1}],"direction":null,"format":"","indent":0,'
    '"type":"root","version":1}}'
)


# ============================================================
# 로깅 설정
# ============================================================

LOGGER_NAME = 'formtable'


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """로깅 설정"""
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """하위 로거 반환 (formtable.<name>)"""
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
