import textwrap
from pathlib import Path

import pytest

mypy_api = pytest.importorskip("mypy.api")

ROOT = Path(__file__).resolve().parents[1]


def _mypy(monkeypatch, tmp_path, *targets):
    monkeypatch.setenv("MYPYPATH", str(ROOT))
    stdout, stderr, status = mypy_api.run(
        [
            "--config-file",
            str(ROOT / "pyproject.toml"),
            "--cache-dir",
            str(tmp_path / ".mypy_cache"),
            *targets,
        ]
    )
    return stdout + stderr, status


def _write(tmp_path, source):
    path = tmp_path / "usage.py"
    path.write_text(textwrap.dedent(source))
    return str(path)


def test_package_type_checks(monkeypatch, tmp_path):
    report, status = _mypy(monkeypatch, tmp_path, "-p", "moldyn")
    assert status == 0, report


def test_same_dimension_vectors_add(monkeypatch, tmp_path):
    usage = _write(
        tmp_path,
        """
        from moldyn.units import Length
        from moldyn.vector import Vector2D

        a: Vector2D[Length] = Vector2D(1.0, 2.0)
        b: Vector2D[Length] = Vector2D(3.0, 4.0)
        c: Vector2D[Length] = a + b - a
        """,
    )
    report, status = _mypy(monkeypatch, tmp_path, usage)
    assert status == 0, report


def test_mixing_dimensions_is_rejected(monkeypatch, tmp_path):
    usage = _write(
        tmp_path,
        """
        from moldyn.units import Length, Velocity
        from moldyn.vector import Vector2D

        p: Vector2D[Length] = Vector2D(1.0, 2.0)
        v: Vector2D[Velocity] = Vector2D(3.0, 4.0)
        p + v
        """,
    )
    report, status = _mypy(monkeypatch, tmp_path, usage)
    assert status == 1
    assert "usage.py:7" in report
    assert "Vector2D[Velocity]" in report
