"""Shared fixtures. Qt runs on the offscreen platform so no display is needed."""

import os

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

import pytest

from calcapp.engine import Calculator, INITIAL_STATE, transition


def _press(*tokens, state=INITIAL_STATE):
    for token in tokens:
        state = transition(state, token)
    return state


@pytest.fixture
def press():
    """Feed tokens through the pure transition function, return the final state."""
    return _press


@pytest.fixture
def calc():
    """A Calculator that records every sink notification."""
    seen = {'display': [], 'expression': []}
    c = Calculator(
        on_display_changed=seen['display'].append,
        on_expression_changed=seen['expression'].append,
    )
    c.seen = seen
    return c


@pytest.fixture(scope='session')
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
