import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "app"
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from validators.record import AttachedMany, AttachedOne, Blob, Record


@pytest.fixture
def make_record():
    """make_record(avatar=1500) -> 单文件；make_record(photos=[10, 20]) -> 多文件；None -> 未挂载"""
    def _make(**sizes):
        values = {}
        for name, size in sizes.items():
            if size is None:
                values[name] = AttachedOne()
            elif isinstance(size, list):
                values[name] = AttachedMany.of(
                    *(Blob(filename=f"{name}_{i}.bin", byte_size=s) for i, s in enumerate(size))
                )
            else:
                values[name] = AttachedOne(Blob(filename=f"{name}.bin", byte_size=size))
        return Record(**values)
    return _make
