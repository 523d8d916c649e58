import io

from orthostar import config
from orthostar.app import demo


def run(argv):
    out = io.StringIO()
    code = demo.main(argv, out=out)
    return code, out.getvalue()


def test_default_scenario_prints_both_starts():
    code, text = run([])
    assert code == 0
    assert "=== (2, 1) -> (2, 5)" in text
    assert "=== (2, 0) -> (2, 5)" in text
    assert "Cell [row=2, col=1]" in text
    assert "cost=80 steps=8" in text
    assert "cost=90 steps=9" in text
    assert "B" in text and "S" in text and "G" in text


def test_penalty_option():
    code, text = run(["--penalty=5"])
    assert code == 0
    assert "cost=90 steps=8 turns=2" in text


def test_map_option_without_path():
    code, text = run([f"--map={config.MAP_DIR / '03_walled_in.json'}"])
    assert code == 0
    assert "no path" in text


def test_missing_map_fails(tmp_path):
    code, text = run([f"--map={tmp_path / 'nope.json'}"])
    assert code == 1
    assert text == ""


def test_bad_cost_fails():
    code, _ = run(["--cost=-3"])
    assert code == 2
