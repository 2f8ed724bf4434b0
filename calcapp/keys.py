# keys.py
# 키보드 입력 -> 계산기 토큰 변환 (버튼 라벨과 같은 토큰을 만든다)

from typing import Optional

from PyQt5.QtCore import Qt

# 특수 키
KEY_TOKENS = {
    Qt.Key_Return: '=',
    Qt.Key_Enter: '=',
    Qt.Key_Backspace: '⌫',
    Qt.Key_Delete: 'CE',
    Qt.Key_Escape: 'C',
    Qt.Key_Slash: '÷',
}

# 그대로 전달하는 입력 문자 ('_' 는 부호 전환)
TYPED_CHARS = '0123456789+-*÷=._'


def key_to_token(key: int, text: str) -> Optional[str]:
    """키 코드와 입력 문자로 토큰을 구한다. 해당 없으면 None"""
    if key in KEY_TOKENS:
        return KEY_TOKENS[key]
    if len(text) == 1 and text in TYPED_CHARS:
        return text
    return None
