"""Tests for record-store paddock, seeding and amendment functions."""

import json

import httpx
import pytest

from agriops.data import paddocks
from agriops.grazing.inputs import Paddock


def request_body(mock, index: int = 0) -> dict:
    return json.loads(mock.calls[index].request.content)


class TestListPaddocks:
    async def test_returns_paddocks(self, mock_record_store, sample_paddock_rows):
        mock_record_store.post("/api/paddocks").mock(
            return_value=httpx.Response(200, json={"ok": True, "data": sample_paddock_rows})
        )

        result = await paddocks.list_paddocks("demo")

        assert [p.name for p in result] == ["North 1", "North 2"]
        assert result[0].head_count == 12
        assert result[1].acres == 0.0
        assert request_body(mock_record_store) == {"action": "listWithCounts", "tenant_id": "demo"}

    async def test_empty(self, mock_record_store):
        mock_record_store.post("/api/paddocks").mock(return_value=httpx.Response(200, json={"ok": True, "data": None}))

        assert await paddocks.list_paddocks("demo") == []


class TestUpsertPaddock:
    async def test_sends_row_with_tenant(self, mock_record_store):
        mock_record_store.post("/api/paddocks").mock(
            return_value=httpx.Response(200, json={"ok": True, "data": {"id": 1}})
        )

        await paddocks.upsert_paddock("demo", Paddock(id="1", name="North 1", acres=5, head_count=9))

        body = request_body(mock_record_store)
        assert body["action"] == "upsertPaddock"
        assert body["row"]["tenant_id"] == "demo"
        assert body["row"]["name"] == "North 1"
        assert body["row"]["acres"] == 5.0
        assert "head_count" not in body["row"]

    async def test_new_paddock_has_no_id(self, mock_record_store):
        mock_record_store.post("/api/paddocks").mock(return_value=httpx.Response(200, json={"ok": True, "data": {}}))

        await paddocks.upsert_paddock("demo", Paddock(id="", name="South 3"))

        assert "id" not in request_body(mock_record_store)["row"]


class TestSeedingRecords:
    async def test_upsert_cleans_species_rates(self, mock_record_store):
        mock_record_store.post("/api/paddocks").mock(
            return_value=httpx.Response(200, json={"ok": True, "data": {"id": 10}})
        )

        result = await paddocks.upsert_seeding_record(
            "demo",
            "1",
            "  Perennial rye + Clover ",
            [
                {"species": " Perennial ryegrass ", "rate_lb_ac": "14"},
                {"species": "", "rate_lb_ac": 3},
                {"species": "White clover", "rate_lb_ac": None},
            ],
            notes="   ",
        )

        assert result == {"id": 10}
        body = request_body(mock_record_store)
        assert body["action"] == "upsertSeeding"
        assert body["tenant_id"] == "demo"
        assert body["row"]["mix_name"] == "Perennial rye + Clover"
        assert body["row"]["mix_items"] == [
            {"species": "Perennial ryegrass", "rate_lb_ac": 14.0},
            {"species": "White clover", "rate_lb_ac": 0.0},
        ]
        assert body["row"]["notes"] is None

    def test_skips_rows_that_are_not_objects(self):
        rows = ["Perennial ryegrass", None, 14, {"species": "White clover", "rate_lb_ac": 3}]

        assert paddocks.clean_species_rates(rows) == [{"species": "White clover", "rate_lb_ac": 3.0}]

    async def test_species_rates_always_a_list(self, mock_record_store):
        mock_record_store.post("/api/paddocks").mock(return_value=httpx.Response(200, json={"ok": True, "data": {}}))

        await paddocks.upsert_seeding_record("demo", "1", None, None)

        assert request_body(mock_record_store)["row"]["mix_items"] == []

    async def test_list(self, mock_record_store):
        mock_record_store.post("/api/paddocks").mock(
            return_value=httpx.Response(200, json={"ok": True, "data": [{"id": 10}]})
        )

        assert await paddocks.list_seeding_records("demo", "1") == [{"id": 10}]
        assert request_body(mock_record_store)["paddock_id"] == "1"

    async def test_delete(self, mock_record_store):
        mock_record_store.post("/api/paddocks").mock(
            return_value=httpx.Response(200, json={"ok": True, "data": {"deleted": 10}})
        )

        assert await paddocks.delete_seeding_record("demo", 10) == {"deleted": 10}
        assert request_body(mock_record_store)["action"] == "deleteSeeding"


class TestAmendmentRecords:
    async def test_upsert(self, mock_record_store):
        mock_record_store.post("/api/paddocks").mock(
            return_value=httpx.Response(200, json={"ok": True, "data": {"id": 3}})
        )

        await paddocks.upsert_amendment_record("demo", "1", " Ag lime ", "1 t/ac", notes="spring")

        row = request_body(mock_record_store)["row"]
        assert row == {
            "paddock_id": "1",
            "date_applied": None,
            "product": "Ag lime",
            "rate": "1 t/ac",
            "notes": "spring",
        }

    async def test_product_required(self, mock_record_store):
        with pytest.raises(ValueError, match="Product is required"):
            await paddocks.upsert_amendment_record("demo", "1", "  ", "1 t/ac")

        assert not mock_record_store.calls

    async def test_list_and_delete(self, mock_record_store):
        mock_record_store.post("/api/paddocks").mock(
            side_effect=[
                httpx.Response(200, json={"ok": True, "data": []}),
                httpx.Response(200, json={"ok": True, "data": {"deleted": 3}}),
            ]
        )

        assert await paddocks.list_amendment_records("demo", "1") == []
        assert await paddocks.delete_amendment_record("demo", 3) == {"deleted": 3}
        assert request_body(mock_record_store, 0)["action"] == "listAmendments"
        assert request_body(mock_record_store, 1)["action"] == "deleteAmendment"


class TestCountHeadByPaddock:
    def test_counts(self):
        rows = [
            {"current_paddock": "North 1"},
            {"current_paddock": " North 1 "},
            {"current_paddock": "North 2"},
            {"current_paddock": ""},
            {"current_paddock": None},
            {},
        ]
        assert paddocks.count_head_by_paddock(rows) == {"North 1": 2, "North 2": 1}

    def test_empty(self):
        assert paddocks.count_head_by_paddock([]) == {}


class TestPaddockCache:
    def test_save_and_load(self, tmp_path, scenario_paddocks):
        path = paddocks.save_paddocks_cache(scenario_paddocks, tmp_path / "paddocks.json")
        assert paddocks.load_paddocks_cache(path) == scenario_paddocks

    def test_load_bare_list(self, tmp_path, sample_paddock_rows):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps(sample_paddock_rows))

        result = paddocks.load_paddocks_file(path)

        assert [p.id for p in result] == ["1", "2"]
        assert result[0].growth_lb_per_acre_per_day == 40

    def test_load_rejects_non_object_rows(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps({"paddocks": [1, "North 1"]}))

        with pytest.raises(ValueError, match="list of paddock objects"):
            paddocks.load_paddocks_file(path)
