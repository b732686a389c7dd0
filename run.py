# -*- coding: utf-8 -*-

"""
Main entry point for launching html2react from a source checkout.
"""

import logging

from html2react.cli import main

if __name__ == '__main__':
    exit_code = main()
    logging.info("===== html2react terminated (exit %s) =====", exit_code)
    raise SystemExit(exit_code)
