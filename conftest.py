# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Root conftest.py so the package imports from a source checkout."""

import sys
from pathlib import Path

# Add repo root to sys.path so cloud_error_reporting imports without installing
_repo_root = Path(__file__).parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))
