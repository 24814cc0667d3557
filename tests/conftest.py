from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from stats_master.config import reset_settings

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, Any, None]:
    reset_settings()
    yield
    reset_settings()
