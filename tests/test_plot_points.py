import pytest

import plot_points


def test_plot_rational_points(tmp_path):
    output = plot_points.plot_rational_points(3, 1, 7, tmp_path / "plots" / "curve.png")
    assert output.exists()
    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_main_default_name(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    plot_points.main(["2", "3", "97"])
    assert (tmp_path / "curve_2_3_97.png").exists()
    assert "Saved plot to" in capsys.readouterr().out


def test_main_bad_modulus(tmp_path, capsys):
    with pytest.raises(SystemExit):
        plot_points.main(["1", "1", "0", "--output", str(tmp_path / "x.png")])
    assert "Error:" in capsys.readouterr().err
