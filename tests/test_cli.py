import json

from flowcanvas import cli
from flowcanvas.sync import BatchResult, CanvasSyncError, HealthStatus


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_convert_json(tmp_path, capsys, decision_flow):
    path = _write(tmp_path, "flow.mmd", decision_flow)
    assert cli.main(["convert", path, "--json", "--seed", "3"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [item["id"] for item in payload][:5] == ["A", "B", "C", "D", "E"]
    assert len(payload) == 10


def test_convert_table_and_preview(tmp_path, capsys, decision_flow):
    path = _write(tmp_path, "flow.mmd", decision_flow)
    assert cli.main(["convert", path, "--preview"]) == 0
    out = capsys.readouterr().out
    assert "5 shape(s), 5 connector(s)" in out
    assert "Preview" in out


def test_convert_reports_errors(tmp_path, capsys):
    path = _write(tmp_path, "empty.mmd", "%% nothing\n")
    assert cli.main(["convert", path]) == 1
    assert "Error:" in capsys.readouterr().out


def test_convert_publishes(tmp_path, capsys, monkeypatch, decision_flow):
    calls = []

    def fake_publish(elements, **kwargs):
        calls.append((len(elements), kwargs))
        return BatchResult(count=len(elements))

    monkeypatch.setattr(cli, "publish_elements", fake_publish)
    monkeypatch.setattr(cli, "check_health", lambda **kwargs: HealthStatus(status="healthy"))
    path = _write(tmp_path, "flow.mmd", decision_flow)
    assert cli.main(["convert", path, "--publish", "--server", "http://canvas.test"]) == 0
    assert calls == [(10, {"client_kwargs": {"base_url": "http://canvas.test"}})]
    assert "Published 10 element(s)" in capsys.readouterr().out


def test_diff_identical(tmp_path, capsys, decision_flow):
    old = _write(tmp_path, "old.mmd", decision_flow)
    new = _write(tmp_path, "new.mmd", decision_flow)
    assert cli.main(["diff", old, new]) == 0
    assert "No structural changes" in capsys.readouterr().out


def test_diff_changes(tmp_path, capsys):
    old = _write(tmp_path, "old.mmd", "graph TD\nA --> B")
    new = _write(tmp_path, "new.mmd", "graph TD\nA --> C")
    assert cli.main(["diff", old, new]) == 1
    out = capsys.readouterr().out
    assert "+ node C" in out
    assert "- edge A -> B" in out


def test_convert_skips_publish_when_server_unhealthy(tmp_path, capsys, monkeypatch, decision_flow):
    def fake_publish(elements, **kwargs):
        raise AssertionError("publish must not run")

    monkeypatch.setattr(cli, "publish_elements", fake_publish)
    monkeypatch.setattr(cli, "check_health", lambda **kwargs: HealthStatus(status="degraded"))
    path = _write(tmp_path, "flow.mmd", decision_flow)
    assert cli.main(["convert", path, "--publish"]) == 1
    assert "not healthy" in capsys.readouterr().out


def test_convert_reports_unreachable_server(tmp_path, capsys, monkeypatch, decision_flow):
    def failing_health(**kwargs):
        raise CanvasSyncError("Could not reach canvas server")

    monkeypatch.setattr(cli, "check_health", failing_health)
    path = _write(tmp_path, "flow.mmd", decision_flow)
    assert cli.main(["convert", path, "--publish"]) == 1
    assert "Could not reach" in capsys.readouterr().out


def test_convert_reports_undecodable_file(tmp_path, capsys):
    path = tmp_path / "bad.mmd"
    path.write_bytes(b"\xff\xfegraph TD\nA --> B\n")
    assert cli.main(["convert", str(path)]) == 1
    out = capsys.readouterr().out
    assert "Error:" in out
    assert "not valid UTF-8" in out
