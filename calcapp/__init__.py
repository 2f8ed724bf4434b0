"""calcapp: PyQt5 데스크톱 계산기.

버튼/키 입력 토큰을 받아 두 줄 표시부(현재 입력, 연산식)를 갱신하는
사칙연산 상태 기계와 그 위에 올린 UI로 구성된다.
"""

from calcapp.engine import (
    Calculator,
    CalculatorState,
    INITIAL_STATE,
    apply_operator,
    format_number,
    transition,
)
from calcapp.tokens import Input, Kind, Operator, classify

__version__ = '0.1.0'
