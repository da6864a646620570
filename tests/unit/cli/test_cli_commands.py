import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

pytest.importorskip("typer")
from typer.testing import CliRunner

from stat_curve_engine.cli.main import app, main
from stat_curve_engine.exceptions import ConfigValidationError, DomainError

runner = CliRunner()
REPO_ROOT = Path(__file__).resolve().parents[3]


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    for key in ("DISTRIBUTION", "SAMPLE_COUNT", "SAMPLE_SIZE", "BIN_COUNT", "SEED", "CONFIDENCE", "ALPHA", "TAIL"):
        monkeypatch.delenv(f"SCE_{key}", raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _json(result) -> dict:
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_clt_emits_histograms():
    result = runner.invoke(
        app,
        ["clt", "--dist", "exponential(1)", "--sample-count", "200", "--sample-size", "5", "--bins", "10", "--seed", "3"],
    )
    payload = _json(result)
    assert payload["config"]["distribution"] == "exponential(1)"
    assert payload["query"] == "dist=exponential(1)&sampleCount=200&sampleSize=5"
    assert payload["theoretical"]["mean"] == 1.0
    assert payload["theoretical"]["mean_variance"] == pytest.approx(0.2)
    assert sum(payload["raw"]["histogram"]["counts"]) == 1000
    assert sum(payload["means"]["histogram"]["counts"]) == 200
    assert len(payload["means"]["histogram"]["bins"]) == 11
    assert payload["means"]["summary"]["count"] == 200


def test_clt_reads_shared_query():
    result = runner.invoke(app, ["clt", "--query", "dist=poisson(3)&sampleCount=50&sampleSize=4", "--seed", "1"])
    payload = _json(result)
    assert payload["config"]["distribution"] == "poisson(3)"
    assert payload["config"]["sample_count"] == 50
    assert payload["config"]["sample_size"] == 4


def test_clt_config_file_and_output(tmp_path):
    config = tmp_path / "run.yaml"
    config.write_text("distribution: uniform_discrete(1,6)\nsample_count: 20\nsample_size: 3\nseed: 9\n")
    out = tmp_path / "out" / "clt.json"
    payload = _json(runner.invoke(app, ["clt", "--config", str(config), "--output", str(out)]))
    assert payload["config"]["sample_count"] == 20
    assert json.loads(out.read_text()) == payload


def test_clt_rejects_bad_sample_size():
    result = runner.invoke(app, ["clt", "--sample-size", "0"])
    assert result.exit_code != 0
    assert isinstance(result.exception, ConfigValidationError)


def test_curve_shared_domain():
    payload = _json(runner.invoke(app, ["curve", "normal", "--curve", "0,1,2563eb,A", "--curve", "2,0.5,e11d48,B"]))
    assert payload["domain"]["min_x"] == -4.0
    assert payload["domain"]["max_x"] == 4.0
    assert [c["name"] for c in payload["curves"]] == ["A", "B"]
    assert payload["query"] == "curve1=0,1,2563eb,A&curve2=2,0.5,e11d48,B"
    assert len(payload["x_ticks"]) == 9


def test_curve_discrete_default():
    payload = _json(runner.invoke(app, ["curve", "poisson"]))
    assert payload["domain"]["max_x"] == 5
    assert payload["x_ticks"] == [0, 1, 2, 3, 4, 5]
    values = payload["curves"][0]["values"]
    assert [v[0] for v in values] == [0, 1, 2, 3, 4, 5]


def test_curve_points_and_query():
    payload = _json(runner.invoke(app, ["curve", "exponential", "--query", "curve1=2,059669,fast", "--points", "4"]))
    assert payload["domain"]["max_x"] == 5
    assert len(payload["curves"][0]["values"]) == 5
    assert payload["curves"][0]["values"][0] == [0.0, 2.0]


def test_curve_unknown_family():
    result = runner.invoke(app, ["curve", "cauchy"])
    assert isinstance(result.exception, ConfigValidationError)


def test_interval_coverage():
    payload = _json(
        runner.invoke(
            app,
            ["interval", "--confidence", "95", "--sample-count", "100", "--sample-size", "4", "--seed", "2", "--intervals"],
        )
    )
    assert payload["coverage"]["total"] == 100
    assert len(payload["intervals"]) == 100
    covered = sum(1 for i in payload["intervals"] if i["covers"])
    assert covered == payload["coverage"]["covered"]


def test_ztest_json():
    payload = _json(runner.invoke(app, ["ztest", "--json"]))
    assert payload["result"]["decision"] == "fail-to-reject"
    assert payload["config"]["n"] == 30
    assert len(payload["critical_regions"]) == 2
    assert 1.0 in payload["x_ticks"]


def test_ztest_query_overrides_defaults():
    payload = _json(runner.invoke(app, ["ztest", "--json", "--query", "sampleMean=2&mu=1&sigma=1&n=25&tail=right"]))
    assert payload["result"]["z_statistic"] == pytest.approx(5.0)
    assert payload["result"]["reject_null"] is True
    assert len(payload["critical_regions"]) == 1


def test_ztest_table():
    result = runner.invoke(app, ["ztest", "--sample-mean", "1.2"])
    assert result.exit_code == 0
    assert "z statistic" in result.stdout
    assert "fail-to-reject" in result.stdout


def _run_cli(*args) -> subprocess.CompletedProcess:
    env = {k: v for k, v in os.environ.items() if not k.startswith("SCE_")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "stat_curve_engine.cli.main", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        env=env,
        timeout=120,
    )


@pytest.mark.parametrize(
    "args, code",
    [
        (["ztest", "--json"], 0),
        (["clt", "--sample-size", "0"], 1),
        (["curve", "normal", "--query", "curve1=abc,1,2563eb"], 1),
        (["clt", "--sample-count", "1000000", "--sample-size", "100", "--seed", "1"], 4),
    ],
)
def test_process_exit_codes(args, code):
    proc = _run_cli(*args)
    assert proc.returncode == code, proc.stderr
    assert "Traceback" not in proc.stderr


def test_process_success_prints_json():
    proc = _run_cli("ztest", "--json")
    assert json.loads(proc.stdout)["config"]["n"] == 30


def _main_exit_code(monkeypatch, *args) -> int:
    monkeypatch.setattr(sys, "argv", ["stat-curve-engine", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def test_main_maps_domain_errors(monkeypatch):
    def boom(*_args, **_kwargs):
        raise DomainError("p must be in (0, 1)")

    monkeypatch.setattr("stat_curve_engine.cli.commands.ztest.evaluate_z_test", boom)
    assert _main_exit_code(monkeypatch, "ztest") == 2


def test_main_maps_unexpected_errors(monkeypatch):
    def boom(*_args, **_kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr("stat_curve_engine.cli.commands.ztest.evaluate_z_test", boom)
    assert _main_exit_code(monkeypatch, "ztest") == 255


def test_explicit_zero_flag_beats_query():
    result = runner.invoke(app, ["clt", "--query", "sampleCount=50&sampleSize=4", "--sample-count", "0"])
    assert isinstance(result.exception, ConfigValidationError)

    result = runner.invoke(app, ["interval", "--query", "confLevel=95&sampleCount=30", "--sample-count", "0"])
    assert isinstance(result.exception, ConfigValidationError)
