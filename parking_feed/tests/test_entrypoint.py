"""Fetch entrypoint tests"""

import json
import os
import subprocess
import sys
from pathlib import Path

from parking_feed.fetch_entrypoint import build_source, main
from parking_feed.ingestion.file_source import FileFeedSource
from parking_feed.ingestion.thingspeak_source import ThingSpeakSource


class TestBuildSource:
    def test_defaults_to_configured_url(self):
        assert isinstance(build_source([]), ThingSpeakSource)

    def test_url_argument(self):
        source = build_source(["https://api.thingspeak.com/channels/1/feeds.json"])
        assert isinstance(source, ThingSpeakSource)
        assert source.request_url == "https://api.thingspeak.com/channels/1/feeds.json"

    def test_file_argument(self, tmp_path):
        source = build_source(["--file", str(tmp_path / "feed.json")])
        assert isinstance(source, FileFeedSource)

    def test_file_without_path(self):
        assert build_source(["--file"]) is None


class TestMain:
    def test_saved_feed(self, feed_file, capsys):
        assert main(["--file", str(feed_file)]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["count"] == 3
        assert [s["reading"] for s in output["spots"]] == [1.0, 0.0, 12.5]

    def test_missing_file_exits_nonzero(self, tmp_path):
        assert main(["--file", str(tmp_path / "missing.json")]) == 1

    def test_bad_url_exits_nonzero(self):
        assert main(["not-a-url"]) == 1

    def test_bad_arguments(self):
        assert main(["--file"]) == 1


class TestCommandLine:
    """Run the module as a real process: stdout carries only the JSON document"""

    def test_stdout_is_json(self, feed_file, tmp_path):
        project_root = Path(__file__).resolve().parents[2]
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(project_root), env.get("PYTHONPATH")]))
        env["LOG_DIR"] = str(tmp_path / "logs")
        env["LOG_LEVEL"] = "DEBUG"

        proc = subprocess.run(
            [sys.executable, "-m", "parking_feed.fetch_entrypoint", "--file", str(feed_file)],
            capture_output=True,
            text=True,
            env=env,
            cwd=tmp_path,
            timeout=60,
        )

        assert proc.returncode == 0, proc.stderr
        output = json.loads(proc.stdout)
        assert output["count"] == 3
        assert output["entry_id"] == "42"
        assert "Fetching parking data" in proc.stderr
