"""Calculator facade tests: output sinks, observable fields and logging."""

import logging

from calcapp.engine import Calculator, INITIAL_STATE


def test_initial_fields():
    c = Calculator()
    assert c.state is INITIAL_STATE
    assert c.display_text == '0'
    assert c.expression_text == ''


def test_sinks_receive_changes(calc):
    for token in ('7', '*', '8', '='):
        calc.handle(token)
    assert calc.seen['display'] == ['7', '8', '56']
    assert calc.seen['expression'] == ['7 *', '7 * 8 =']
    assert calc.display_text == '56'
    assert calc.expression_text == '7 * 8 ='


def test_unchanged_text_is_not_renotified(calc):
    calc.handle('5')
    calc.handle('+')
    calc.handle('-')
    assert calc.seen['display'] == ['5']
    assert calc.seen['expression'] == ['5 +', '5 -']


def test_ignored_token_changes_nothing(calc):
    calc.handle('1')
    before = calc.state
    calc.handle('q')
    calc.handle('')
    assert calc.state is before
    assert calc.seen['display'] == ['1']


def test_reset_notifies_sinks(calc):
    for token in ('2', '+', '3'):
        calc.handle(token)
    calc.reset()
    assert calc.state == INITIAL_STATE
    assert calc.seen['display'][-1] == '0'
    assert calc.seen['expression'][-1] == ''


def test_works_without_sinks():
    c = Calculator()
    for token in ('9', '÷', '2', '='):
        c.handle(token)
    assert c.display_text == '4.5'


def test_logs_ignored_token(calc, caplog):
    caplog.set_level(logging.DEBUG, logger='calcapp')
    calc.handle('sin')
    assert any('무시' in r.getMessage() for r in caplog.records)


def test_logs_divide_by_zero(calc, caplog):
    caplog.set_level(logging.DEBUG, logger='calcapp')
    for token in ('5', '÷', '0', '='):
        calc.handle(token)
    assert calc.display_text == '0'
    assert any('0으로 나누기' in r.getMessage() for r in caplog.records)


def test_logs_chained_divide_by_zero_only_when_applied(calc, caplog):
    caplog.set_level(logging.DEBUG, logger='calcapp')
    for token in ('5', '÷', '0', '÷', '+'):
        calc.handle(token)
    assert calc.display_text == '0'
    hits = [r for r in caplog.records if '0으로 나누기' in r.getMessage()]
    assert len(hits) == 1
