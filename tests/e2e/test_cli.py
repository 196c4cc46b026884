from __future__ import annotations

import json

from cli.linkguard_cli import main


def _run(capsys, *argv):
    code = main(list(argv))
    return code, json.loads(capsys.readouterr().out)


def test_assess_command(capsys):
    code, payload = _run(capsys, "assess", "https://trusted.gov/info", "not a url")
    assert code == 0
    assert [item["score"] for item in payload] == [25, 100]


def test_explain_command_lists_rules(capsys):
    code, payload = _run(capsys, "explain", "http://free-prize-win123456.xyz")
    assert code == 0
    assert payload["valid"] is True
    assert payload["score"] == 90
    assert {hit["id"] for hit in payload["hits"]} == {
        "suspicious_tld",
        "lure_keyword",
        "plain_http_scheme",
        "long_digit_run",
    }


def test_record_command_for_unknown_url(capsys):
    code, payload = _run(capsys, "record", "https://unknown.example/")
    assert code == 1
    assert payload["error"] == "RECORD_NOT_FOUND"


def test_feedback_persists_between_invocations(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("LINKGUARD_STORE_PATH", str(tmp_path / "threats.json"))
    url = "https://cli.example.com/deal"

    _run(capsys, "assess", url)
    for _ in range(3):
        code, payload = _run(capsys, "feedback", url, "negative")
        assert payload == {"url": url, "accepted": True}

    code, record = _run(capsys, "record", url)
    assert code == 0
    # 50 +10 (keyword) -5 (https) = 55, nudged once to 45
    assert record["score"] == 45
    assert record["feedback_count"] == 3
    assert record["bucket"] == "medium"


def test_bulk_command_reads_text(capsys):
    code, payload = _run(capsys, "bulk", "https://trusted.gov/info,https://trusted.gov/info")
    assert code == 0
    assert [item["score"] for item in payload] == [25, 25]


def test_dashboard_command(capsys):
    code, payload = _run(capsys, "dashboard")
    assert code == 0
    assert set(payload["distribution"]) == {"low", "medium", "high"}
