# window.py
# PyQt5 UI: 버튼/키보드 -> Calculator 엔진, 엔진 출력 -> 두 줄 표시부

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLabel,
)

from calcapp import config
from calcapp.engine import Calculator
from calcapp.keys import key_to_token


def button_role(label: str) -> str:
    if label in config.CONTROL_BUTTONS:
        return 'control'
    if label in config.OPERATOR_BUTTONS:
        return 'operator'
    return 'digit'


class CalculatorWindow(QWidget):
    """계산기 창: 연산식 표시부, 메인 표시부, 버튼 그리드"""

    def __init__(self) -> None:
        super().__init__()
        self.buttons = {}
        self._build_ui()
        # 표시부는 엔진의 출력 싱크로만 갱신된다
        self.engine = Calculator(
            on_display_changed=self.display.setText,
            on_expression_changed=self.expression.setText,
        )

    def _build_ui(self) -> None:
        self.setWindowTitle(config.WINDOW_TITLE)
        self.move(config.WINDOW_X, config.WINDOW_Y)
        self.setFixedSize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        root = QVBoxLayout()
        root.setContentsMargins(config.LAYOUT_MARGIN, config.LAYOUT_MARGIN,
                                config.LAYOUT_MARGIN, config.LAYOUT_MARGIN)
        root.setSpacing(config.LAYOUT_SPACING)
        self.setLayout(root)

        # 연산식 표시부 (위)
        self.expression = QLabel('')
        self.expression.setAlignment(Qt.AlignRight | Qt.AlignTop)
        font = QFont(self.expression.font())
        font.setPointSize(config.EXPRESSION_FONT_SIZE)
        self.expression.setFont(font)
        root.addWidget(self.expression)

        # 메인 표시부 (아래)
        self.display = QLabel('0')
        self.display.setAlignment(Qt.AlignRight | Qt.AlignBottom)
        font = QFont(self.display.font())
        font.setPointSize(config.DISPLAY_FONT_SIZE)
        self.display.setFont(font)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(config.BUTTON_SPACING)
        root.addLayout(grid)

        for r, row in enumerate(config.BUTTON_ROWS):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(config.BUTTON_MIN_HEIGHT)
                btn.setCursor(Qt.PointingHandCursor)
                # 키보드 포커스를 뺏지 않도록
                btn.setFocusPolicy(Qt.NoFocus)
                btn.setProperty('role', button_role(label))
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_token(ch))
                grid.addWidget(btn, r, c)
                self.buttons[label] = btn

        self.setFocusPolicy(Qt.StrongFocus)

    def on_token(self, token: str) -> None:
        # 마우스와 키보드 입력의 단일 진입점
        self.engine.handle(token)

    def keyPressEvent(self, event) -> None:
        token = key_to_token(event.key(), event.text())
        if token is None:
            super().keyPressEvent(event)
            return
        self.on_token(token)
