import io
import json
from pathlib import Path

import pytest

import run_scenario

SCENARIO = Path(__file__).resolve().parent.parent / "scenarios" / "mixed_directions.json"


def test_runs_bundled_scenario(tmp_path, capsys):
    output = tmp_path / "out" / "trace.json"
    run_scenario.main([str(SCENARIO), "--output", str(output)])

    printed = capsys.readouterr().out
    assert "Scenario: mixed_directions" in printed
    assert "--- Processing Up Requests ---" in printed
    assert "--- Processing Down Requests ---" in printed
    assert "=== Elevator is now idle at Floor 1 ===" in printed

    results = json.loads(output.read_text())
    assert results["policy"] == "sweep"
    assert results["requests"][0] == {"source": 9, "destination": 2}
    assert results["summary"]["boarded"] == results["summary"]["alighted"] == 3


def test_policy_flag_overrides_scenario(tmp_path):
    output = tmp_path / "trace.json"
    run_scenario.main([str(SCENARIO), "--policy", "sparse", "--output", str(output)])
    assert json.loads(output.read_text())["policy"] == "sparse"


def test_invalid_request_exits_with_usage_error(tmp_path, capsys):
    scenario = tmp_path / "bad.json"
    scenario.write_text(json.dumps({"requests": [[3, 3]]}))
    with pytest.raises(SystemExit) as excinfo:
        run_scenario.main([str(scenario)])
    assert excinfo.value.code == 2
    assert "cannot be the same" in capsys.readouterr().err


def test_oversized_batch_is_rejected(tmp_path):
    scenario = tmp_path / "big.json"
    scenario.write_text(json.dumps({"building": {"max_requests": 1}, "requests": [[1, 2], [2, 3]]}))
    with pytest.raises(SystemExit):
        run_scenario.main([str(scenario)])


def test_interactive_session_runs_collected_batch(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n4\nn\n"))
    output = tmp_path / "trace.json"
    run_scenario.main(["--output", str(output)])

    printed = capsys.readouterr().out
    assert "=== Elevator is now idle at Floor 1 ===" in printed
    results = json.loads(output.read_text())
    assert results["scenario"] == "interactive"
    assert results["requests"] == [{"source": 1, "destination": 4}]


@pytest.mark.parametrize("content", ["{not json", "[[1, 2]]"])
def test_unreadable_scenario_is_a_usage_error(tmp_path, content):
    scenario = tmp_path / "broken.json"
    scenario.write_text(content)
    with pytest.raises(SystemExit) as excinfo:
        run_scenario.main([str(scenario)])
    assert excinfo.value.code == 2


def test_missing_scenario_is_a_usage_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        run_scenario.main([str(tmp_path / "absent.json")])
    assert excinfo.value.code == 2


def test_unknown_log_level_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        run_scenario.main([str(SCENARIO), "--log-level", "chatty"])
    assert excinfo.value.code == 2
