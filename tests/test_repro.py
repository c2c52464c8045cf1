import random

import numpy as np

from blowfishlab.utils.repro import read_json, set_global_seed, write_json


def test_set_global_seed_is_reproducible():
    set_global_seed(123)
    first = (random.random(), np.random.rand())
    set_global_seed(123)
    assert (random.random(), np.random.rand()) == first


def test_json_roundtrip(tmp_path):
    path = tmp_path / "nested" / "report.json"
    write_json(path, {"seed": 1, "ok": True})
    assert read_json(path) == {"seed": 1, "ok": True}
