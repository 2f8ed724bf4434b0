# config.py
# 계산기 앱 설정값 (창 크기, 버튼 배치, 로그 경로)

WINDOW_TITLE = 'Calculator'
WINDOW_WIDTH = 334   # 윈도우 기본 계산기 크기
WINDOW_HEIGHT = 464
WINDOW_X = 50
WINDOW_Y = 50

BUTTON_SPACING = 3
BUTTON_MIN_HEIGHT = 56
LAYOUT_MARGIN = 20
LAYOUT_SPACING = 10

DISPLAY_FONT_SIZE = 28
EXPRESSION_FONT_SIZE = 11

BUTTON_ROWS = [
    ['±', 'CE', 'C', '⌫'],
    ['7', '8', '9', '÷'],
    ['4', '5', '6', '*'],
    ['1', '2', '3', '-'],
    ['0', '.', '=', '+'],
]

# 버튼 그룹 (스타일 구분용 role 속성)
CONTROL_BUTTONS = ('±', 'CE', 'C', '⌫')
OPERATOR_BUTTONS = ('=', '÷', '*', '-', '+')

LOGGER_NAME = 'calcapp'
LOG_PATH = 'calculator.log'
