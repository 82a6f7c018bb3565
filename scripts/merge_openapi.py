#!/usr/bin/env python3
"""
Merge the specs/ directory next to this script into dist/ and
generate the Swagger UI index page.
"""
import os
import sys
from pathlib import Path

from py_api_docs.cli import main

ROOT = Path(__file__).resolve().parent.parent

if __name__ == "__main__":
    os.environ.setdefault("API_DOCS_SPECS_DIR", str(ROOT / "specs"))
    os.environ.setdefault("API_DOCS_DIST_DIR", str(ROOT / "dist"))
    sys.exit(main())
