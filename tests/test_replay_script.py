import json
import os
import subprocess
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]
SCRIPT = REPO / "scripts" / "replay_beacons.py"

VISIT = {
    "kind": "visit",
    "body": {
        "session": "42",
        "visitor": {"tz": "Europe/Zurich", "lang": "en", "screen": [1920, 1080]},
        "page": {"url": "https://shop.example/p?campaign=spring"},
    },
}


def run(tmp_path, lines):
    beacons = tmp_path / "beacons.jsonl"
    beacons.write_text("\n".join(lines) + "\n", encoding="utf-8")

    env = os.environ.copy()
    env["BEACON_LOG_LEVEL"] = "INFO"
    env.pop("BEACON_LOG_FILE", None)

    return subprocess.run(
        [sys.executable, str(SCRIPT), str(beacons), "--project", "9"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
    )


def test_replay_accepts_valid_beacons(tmp_path):
    event = {**VISIT, "kind": "event", "project": 4}
    event["body"] = {**VISIT["body"], "name": "signup", "data": {"plan": "pro"}}
    res = run(tmp_path, [json.dumps(VISIT), "", json.dumps(event)])

    assert res.returncode == 0, res.stderr
    records = [json.loads(line) for line in res.stdout.splitlines()]
    assert len(records) == 2
    assert records[0]["project"] == 9
    assert records[0]["session"] == 42
    assert records[0]["visitor"]["region"] == "CH"
    assert records[0]["utm_param"]["campaign"] == "spring"
    assert records[1]["project"] == 4
    assert records[1]["name"] == "signup"
    assert "2 accepted, 0 rejected" in res.stderr


def test_replay_reports_rejected_lines(tmp_path):
    bad_session = {**VISIT, "body": {**VISIT["body"], "session": "abc"}}
    res = run(tmp_path, [json.dumps(VISIT), json.dumps(bad_session), "{not json", json.dumps({"body": {}})])

    assert res.returncode == 1
    assert len(res.stdout.splitlines()) == 1
    assert "line 2 rejected: malformed session identifier" in res.stderr
    assert "line 3 rejected" in res.stderr
    assert "line 4 rejected" in res.stderr
