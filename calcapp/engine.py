# engine.py
# 계산기 연산 엔진: 상태 값 + 순수 전이 함수 + 출력 싱크를 가진 래퍼

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional

from calcapp.tokens import Input, Kind, Operator, classify

logger = logging.getLogger(__name__)

# 64비트 정수 범위 (상한은 미포함)
_INT64_MIN = -2 ** 63
_INT64_MAX = 2 ** 63


@dataclass(frozen=True)
class CalculatorState:
    """전이마다 새로 만들어지는 계산기 상태"""

    stored_operand: float = 0.0
    display_operand: float = 0.0
    pending_operator: Optional[Operator] = None
    display_text: str = '0'
    expression_text: str = ''
    start_new_entry: bool = True
    operator_just_pressed: bool = False


INITIAL_STATE = CalculatorState()


def apply_operator(op: Operator, a: float, b: float) -> float:
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.MULTIPLY:
        return a * b
    if op is Operator.DIVIDE:
        if b == 0:
            # 0 나누기는 오류 대신 0
            logger.debug('[정보] 0으로 나누기: 결과를 0으로 처리합니다.')
            return 0.0
        return a / b
    return b


def format_number(value: float) -> str:
    """정수값이면 소수부 없이, 아니면 파이썬 기본 float 표기"""
    if _INT64_MIN <= value < _INT64_MAX and value == int(value):
        return str(int(value))
    return str(value)


def parse_number(text: str) -> Optional[float]:
    try:
        return float(text)
    except ValueError:
        return None


def _write_display(state: CalculatorState, value: float) -> CalculatorState:
    return replace(state, display_operand=value, display_text=format_number(value))


def _enter_digit(state: CalculatorState, digit: int) -> CalculatorState:
    value = None
    if not (state.start_new_entry or state.display_text == '0'):
        text = state.display_text + str(digit)
        value = parse_number(text)
    if value is None:
        # 새 입력 시작 (또는 이어붙인 문자열이 숫자가 아닌 경우)
        text = str(digit)
        value = float(digit)
    return replace(state, display_text=text, display_operand=value,
                   start_new_entry=False, operator_just_pressed=False)


def _enter_decimal_point(state: CalculatorState) -> CalculatorState:
    if state.start_new_entry:
        return replace(state, display_text='0.', display_operand=0.0,
                       start_new_entry=False, operator_just_pressed=False)
    if '.' in state.display_text:
        return replace(state, operator_just_pressed=False)
    text = state.display_text + '.'
    value = parse_number(text)
    if value is None:
        return replace(state, operator_just_pressed=False)
    return replace(state, display_text=text, display_operand=value,
                   operator_just_pressed=False)


def _toggle_sign(state: CalculatorState) -> CalculatorState:
    state = _write_display(state, -state.display_operand)
    return replace(state, operator_just_pressed=False)


def _select_operator(state: CalculatorState, op: Operator) -> CalculatorState:
    if state.pending_operator is not None and not state.operator_just_pressed:
        # 연쇄 계산: 직전 연산을 먼저 적용 (우선순위 없이 왼쪽부터)
        stored = apply_operator(state.pending_operator,
                                state.stored_operand, state.display_operand)
        state = _write_display(state, stored)
    else:
        # 연산자만 바꾸거나 첫 연산자
        stored = state.display_operand
    return replace(
        state,
        stored_operand=stored,
        pending_operator=op,
        operator_just_pressed=True,
        start_new_entry=True,
        expression_text=f'{format_number(stored)} {op.symbol}',
    )


def _equals(state: CalculatorState) -> CalculatorState:
    op = state.pending_operator
    if op is None:
        # 대기 연산자가 없으면 현재 값을 그대로 결과로 (= 반복 시에도 동일)
        result = state.display_operand
        expression = f'{format_number(result)} ='
    else:
        result = apply_operator(op, state.stored_operand, state.display_operand)
        expression = (f'{format_number(state.stored_operand)} {op.symbol} '
                      f'{format_number(state.display_operand)} =')
    state = _write_display(state, result)
    return replace(
        state,
        stored_operand=result,
        pending_operator=None,
        start_new_entry=True,
        operator_just_pressed=True,
        expression_text=expression,
    )


def _backspace(state: CalculatorState) -> CalculatorState:
    if state.start_new_entry:
        return state
    text = state.display_text[:-1]
    if text in ('', '-'):
        return _write_display(state, 0.0)
    value = parse_number(text)
    if value is None:
        return _write_display(state, 0.0)
    if value == 0 and '.' not in text:
        # '-0' 같은 남은 문자열은 '0'으로 정규화
        return _write_display(state, 0.0)
    return replace(state, display_text=text, display_operand=value)


def _clear_entry(state: CalculatorState) -> CalculatorState:
    state = _write_display(state, 0.0)
    expression = state.expression_text
    if expression.endswith('='):
        # 완료된 계산식만 지우고, 진행 중인 연산식은 유지
        expression = ''
    return replace(state, start_new_entry=True, expression_text=expression)


def _clear_all(state: CalculatorState) -> CalculatorState:
    state = _clear_entry(state)
    return replace(state, stored_operand=0.0, pending_operator=None,
                   expression_text='', operator_just_pressed=False)


def step(state: CalculatorState, entry: Input) -> CalculatorState:
    """분류된 입력 하나를 적용한 새 상태를 반환한다."""
    kind = entry.kind
    if kind is Kind.DIGIT:
        return _enter_digit(state, entry.value)
    if kind is Kind.DECIMAL_POINT:
        return _enter_decimal_point(state)
    if kind is Kind.SIGN_TOGGLE:
        return _toggle_sign(state)
    if kind is Kind.OPERATOR:
        return _select_operator(state, entry.value)
    if kind is Kind.EQUALS:
        return _equals(state)
    if kind is Kind.BACKSPACE:
        return _backspace(state)
    if kind is Kind.CLEAR_ENTRY:
        return _clear_entry(state)
    if kind is Kind.CLEAR_ALL:
        return _clear_all(state)
    return state


def transition(state: CalculatorState, token) -> CalculatorState:
    """(상태, 토큰) -> 새 상태. 인식할 수 없는 토큰은 상태를 그대로 돌려준다."""
    return step(state, classify(token))


class Calculator:
    """상태를 보관하고 표시 문자열이 바뀔 때 출력 싱크를 호출한다.

    on_display_changed / on_expression_changed 는 새 문자열 하나를 받는
    콜백으로, UI 쪽에서 생성자에 넘겨준다.
    """

    def __init__(
        self,
        on_display_changed: Optional[Callable[[str], None]] = None,
        on_expression_changed: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._on_display_changed = on_display_changed
        self._on_expression_changed = on_expression_changed
        self._state = INITIAL_STATE

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display_text(self) -> str:
        return self._state.display_text

    @property
    def expression_text(self) -> str:
        return self._state.expression_text

    def handle(self, token) -> None:
        entry = classify(token)
        if entry.kind is Kind.IGNORED:
            logger.debug('[무시] 인식할 수 없는 입력: %r', token)
            return
        self._update(step(self._state, entry))
        logger.debug('[입력] %r -> 표시=%s, 연산식=%r',
                     token, self._state.display_text, self._state.expression_text)

    def reset(self) -> None:
        self._update(INITIAL_STATE)

    def _update(self, new_state: CalculatorState) -> None:
        old_state = self._state
        self._state = new_state
        if new_state.display_text != old_state.display_text and self._on_display_changed:
            self._on_display_changed(new_state.display_text)
        if new_state.expression_text != old_state.expression_text and self._on_expression_changed:
            self._on_expression_changed(new_state.expression_text)
