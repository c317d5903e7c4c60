#!/usr/bin/env python3
import sys
import os
import logging
import argparse
from pathlib import Path

from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QIcon

from . import __version__
from .utils.config import Config
from .utils.logging_utils import get_logger
from .widgets.csv_editor_widget import CsvEditorWidget


def parse_args(args):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='SimpleCSV - Plain comma-separated table editor')
    parser.add_argument('file', nargs='?', help='CSV file to open')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'SimpleCSV {__version__}')
    return parser.parse_args(args)


def main(args=None):
    """Main entry point for SimpleCSV"""
    if args is None:
        args = sys.argv[1:]

    args = parse_args(args)
    config = Config()

    level = logging.DEBUG if args.verbose else config.get_log_level()
    get_logger("simplecsv", level)

    if args.file and not os.path.isfile(args.file):
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    # Create Qt application if not already created
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
        app.setApplicationName('SimpleCSV')
        app.setApplicationVersion(__version__)
        app.setStyle('Fusion')
        app.setWindowIcon(QIcon.fromTheme('x-office-spreadsheet', QIcon.fromTheme('text-csv')))

    widget = CsvEditorWidget(config=config)
    widget.setWindowIcon(app.windowIcon())
    widget.resize(1000, 700)
    widget.show()

    if args.file and not widget.load_csv_file(Path(args.file)):
        print(f"Error: Could not open {args.file}", file=sys.stderr)

    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
