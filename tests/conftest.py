"""共通フィクスチャ。

- SPD_* 環境変数の隔離（settings を毎テスト再読込）
- 小さな Mesh 試料と記録用描画先
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from spindraw.common import settings
from spindraw.engine.core.mesh import Mesh
from spindraw.engine.render.recording import RecordingSurface

_ENV_KEYS = ("SPD_LOG_LEVEL", "SPD_ANGLE_WRAP", "SPD_DEBUG_TICKS", "SPD_FPS")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_KEYS:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def square_mesh() -> Mesh:
    return Mesh([(-100.0, -100.0), (100.0, -100.0), (100.0, 100.0), (-100.0, 100.0)])


@pytest.fixture()
def triangle_mesh() -> Mesh:
    pts = np.array([[0.0, 0.0], [10.0, 0.0], [0.0, 5.0]], dtype=np.float64)
    return Mesh(pts)


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface(width=600, height=600)
