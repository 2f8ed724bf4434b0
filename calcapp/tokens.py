# tokens.py
# 버튼 라벨/키 입력 문자열을 정규화된 입력으로 분류한다.

from enum import Enum
from typing import NamedTuple, Optional, Union


class Operator(Enum):
    """사칙연산자. 값은 연산식 표시부에 쓰이는 기호"""

    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '÷'

    @property
    def symbol(self) -> str:
        return self.value


class Kind(Enum):
    DIGIT = 'digit'
    DECIMAL_POINT = 'decimal_point'
    SIGN_TOGGLE = 'sign_toggle'
    OPERATOR = 'operator'
    EQUALS = 'equals'
    BACKSPACE = 'backspace'
    CLEAR_ENTRY = 'clear_entry'
    CLEAR_ALL = 'clear_all'
    IGNORED = 'ignored'


class Input(NamedTuple):
    kind: Kind
    value: Optional[Union[int, Operator]] = None


DIGITS = '0123456789'

_OPERATORS = {
    '+': Operator.ADD,
    '-': Operator.SUBTRACT,
    '*': Operator.MULTIPLY,
    '÷': Operator.DIVIDE,
    '/': Operator.DIVIDE,  # ASCII 별칭
}

_CONTROLS = {
    '.': Input(Kind.DECIMAL_POINT),
    '±': Input(Kind.SIGN_TOGGLE),
    '_': Input(Kind.SIGN_TOGGLE),  # 키보드용 부호 전환
    '=': Input(Kind.EQUALS),
    '⌫': Input(Kind.BACKSPACE),
    'CE': Input(Kind.CLEAR_ENTRY),
    'C': Input(Kind.CLEAR_ALL),
}

IGNORED = Input(Kind.IGNORED)


def classify(token) -> Input:
    """토큰 전체가 정확히 일치할 때만 인식하고, 그 외는 IGNORED"""
    if not isinstance(token, str) or not token:
        return IGNORED
    if len(token) == 1 and token in DIGITS:
        return Input(Kind.DIGIT, int(token))
    if token in _OPERATORS:
        return Input(Kind.OPERATOR, _OPERATORS[token])
    return _CONTROLS.get(token, IGNORED)
