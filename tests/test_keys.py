import pytest
from PyQt5.QtCore import Qt

from calcapp.keys import key_to_token
from calcapp.tokens import Kind, classify


@pytest.mark.parametrize('key, text, token', [
    (Qt.Key_Return, '\r', '='),
    (Qt.Key_Enter, '\r', '='),
    (Qt.Key_Backspace, '\b', '⌫'),
    (Qt.Key_Delete, '', 'CE'),
    (Qt.Key_Escape, '\x1b', 'C'),
    (Qt.Key_Slash, '/', '÷'),
    (Qt.Key_5, '5', '5'),
    (Qt.Key_Plus, '+', '+'),
    (Qt.Key_Asterisk, '*', '*'),
    (Qt.Key_Period, '.', '.'),
    (Qt.Key_Underscore, '_', '_'),
    (Qt.Key_Equal, '=', '='),
])
def test_key_tokens(key, text, token):
    assert key_to_token(key, text) == token


@pytest.mark.parametrize('key, text', [
    (Qt.Key_A, 'a'),
    (Qt.Key_C, 'C'),
    (Qt.Key_Percent, '%'),
    (Qt.Key_Shift, ''),
])
def test_other_keys_produce_nothing(key, text):
    assert key_to_token(key, text) is None


def test_keyboard_and_button_tokens_classify_alike():
    # 키보드 토큰은 모두 버튼과 같은 분류를 가진다
    for key, text in [(Qt.Key_Return, '\r'), (Qt.Key_Slash, '/'), (Qt.Key_Underscore, '_')]:
        assert classify(key_to_token(key, text)).kind is not Kind.IGNORED
