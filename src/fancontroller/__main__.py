"""Run with: python -m fancontroller"""
import sys

from fancontroller.app.main import main

if __name__ == "__main__":
    sys.exit(main())
