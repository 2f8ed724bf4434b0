#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
import argparse

from calcapp.config import LOG_PATH
from calcapp.logger import setup_logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='사칙연산 데스크톱 계산기 (PyQt5)'
    )
    parser.add_argument('--log', default=LOG_PATH,
                        help='로그 파일 경로(기본값: calculator.log)')
    parser.add_argument('--verbose', action='store_true',
                        help='입력마다 DEBUG 로그를 남깁니다')
    return parser.parse_args(argv)


def run(argv=None) -> int:
    # Qt는 인자 파싱 이후에 불러온다 (--help 는 디스플레이 없이 동작)
    from PyQt5.QtWidgets import QApplication
    from calcapp.window import CalculatorWindow

    args = parse_args(argv)
    logger = setup_logger(args.log, args.verbose)
    logger.info('[시작] 계산기를 실행합니다.')

    app = QApplication(sys.argv[:1])
    w = CalculatorWindow()
    w.show()
    code = app.exec()
    logger.info('[종료] 종료 코드=%d', code)
    return code


def main() -> None:
    try:
        sys.exit(run())
    except Exception as e:
        setup_logger().exception('[오류] 예기치 않은 오류로 종료합니다.')
        print(f'[오류] {e}')
        sys.exit(1)


if __name__ == '__main__':
    main()
