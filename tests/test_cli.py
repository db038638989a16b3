"""Tests for the grazing CLI commands."""

import argparse
import json

import httpx
import pytest

from agriops.grazing import cli


@pytest.fixture
def paddock_file(tmp_path, scenario_paddocks):
    path = tmp_path / "paddocks.json"
    path.write_text(json.dumps([p.to_record() for p in scenario_paddocks]))
    return path


def plan_args(path, **overrides) -> argparse.Namespace:
    values = {"file": str(path), "head": 60, "weight": 1200.0, "intake": 2.6, "horizon": 10.0}
    values.update(overrides)
    return argparse.Namespace(**values)


class TestCmdPlan:
    async def test_prints_budget_and_moves(self, paddock_file, capsys):
        await cli.cmd_plan(plan_args(paddock_file))

        out = capsys.readouterr().out
        assert "Daily demand: 1,872 lb DM/day" in out
        assert "North 1" in out
        assert "supplemental feed required" in out
        assert "4 moves" in out

    async def test_defaults_herd(self, paddock_file, capsys):
        await cli.cmd_plan(plan_args(paddock_file, head=None, weight=None, intake=None))

        # 45 head x 1200 lb x 2.5%
        assert "Daily demand: 1,350 lb DM/day" in capsys.readouterr().out


class TestCmdCosts:
    async def test_zone_defaults(self, tmp_path, capsys):
        path = tmp_path / "paddocks.json"
        path.write_text(json.dumps({"paddocks": [{"id": 1, "name": "South 1", "acres": 12}]}))

        await cli.cmd_costs(argparse.Namespace(file=str(path), zone="Zone 6"))

        out = capsys.readouterr().out
        assert "South 1" in out
        assert "$1,752" in out

    async def test_unknown_zone(self, paddock_file, capsys):
        await cli.cmd_costs(argparse.Namespace(file=str(paddock_file), zone="Zone 99"))

        assert "Unknown zone 'Zone 99'" in capsys.readouterr().out


class TestCmdFetch:
    async def test_caches_paddocks(self, mock_record_store, sample_paddock_rows, tmp_path, monkeypatch, capsys):
        mock_record_store.post("/api/paddocks").mock(
            return_value=httpx.Response(200, json={"ok": True, "data": sample_paddock_rows})
        )
        saved = {}

        def fake_save(paddocks):
            saved["paddocks"] = paddocks
            return tmp_path / "paddocks.json"

        monkeypatch.setattr(cli, "save_paddocks_cache", fake_save)

        await cli.cmd_fetch(argparse.Namespace(tenant="demo"))

        assert len(saved["paddocks"]) == 2
        assert "Cached 2 paddocks" in capsys.readouterr().out

    async def test_reports_errors(self, mock_record_store, capsys):
        mock_record_store.post("/api/paddocks").mock(
            return_value=httpx.Response(401, json={"ok": False, "error": "unauthorized"})
        )

        await cli.cmd_fetch(argparse.Namespace(tenant="demo"))

        assert "Error: listWithCounts failed: unauthorized" in capsys.readouterr().out


class TestLoadPaddocks:
    async def test_bad_json(self, tmp_path, capsys):
        path = tmp_path / "paddocks.json"
        path.write_text("{not json")

        await cli.cmd_plan(plan_args(path))

        out = capsys.readouterr().out
        assert out.startswith("Error: could not load paddocks from")
        assert "Grazing Plan" not in out

    async def test_rows_not_objects(self, tmp_path, capsys):
        path = tmp_path / "paddocks.json"
        path.write_text(json.dumps(["North 1", "North 2"]))

        await cli.cmd_costs(argparse.Namespace(file=str(path), zone=None))

        assert "Error: could not load paddocks" in capsys.readouterr().out

    async def test_missing_file(self, tmp_path, capsys):
        await cli.cmd_plan(plan_args(tmp_path / "missing.json"))

        assert "Error: could not load paddocks" in capsys.readouterr().out
