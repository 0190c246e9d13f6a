from __future__ import annotations

import json
from pathlib import Path

import pytest

from ads_analytics.cli import build_parser, main


@pytest.fixture()
def metrics_csv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ADS_LOG_PATH", str(tmp_path / "logs" / "cli.log"))
    path = tmp_path / "metrics.csv"
    path.write_text(
        "Date,Impressions,Clicks,CTPR,Sales,Ad Sales\n"
        'D1,100,10,1.0,"1,000",400\n'
        'D2,150,12,0,"2,000",500\n',
        encoding="utf-8",
    )
    return path


def test_metrics_command_prints_payload(metrics_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["metrics", "--file", str(metrics_csv), "--window", "12"])
    out = json.loads(capsys.readouterr().out)
    assert out["Current"]["Sales"] == "2.00K"
    assert out["Previous"]["Impressions"] == "100"
    assert out["trends"]["Impressions"]["values"] == [100.0, 150.0]
    growth = {d["label"]: d["growth"] for d in out["deltas"]}
    assert growth["Impressions"] == pytest.approx(50.0)


def test_growth_command(metrics_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["growth", "--file", str(metrics_csv)])
    out = json.loads(capsys.readouterr().out)
    assert [d["label"] for d in out] == ["Impressions", "Clicks", "CTPR"]
    assert out[1]["growth"] == pytest.approx(20.0)
    assert out[2]["growth"] == pytest.approx(-100.0)


def test_growth_command_selected_metrics(metrics_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["growth", "--file", str(metrics_csv), "--metric", "Sales"])
    out = json.loads(capsys.readouterr().out)
    assert out == [
        {"label": "Sales", "growth": 100.0, "value": "2,000", "previousValue": "1,000", "comparable": True}
    ]


def test_distribution_command(metrics_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["distribution", "--file", str(metrics_csv)])
    out = json.loads(capsys.readouterr().out)
    assert out["ad_share_pct"] == pytest.approx(25.0)


def test_missing_source_exits_with_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADS_LOG_PATH", str(tmp_path / "cli.log"))
    with pytest.raises(SystemExit) as exc:
        main(["metrics", "--file", str(tmp_path / "missing.xlsx")])
    assert exc.value.code == 1


def test_window_must_be_positive() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["metrics", "--window", "0"])
