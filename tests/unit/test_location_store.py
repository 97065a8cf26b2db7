"""Tests for the in-memory location store."""

from kidmap.models.location import LocationCreate, LocationType


class TestReplaceAll:
    def test_round_trip(self, store, sample_records):
        store.replace_all(sample_records)
        locations = store.get_locations()
        assert len(locations) == len(sample_records)
        assert [loc.id for loc in locations] == [1, 2, 3]
        assert [loc.name for loc in locations] == [r.name for r in sample_records]

    def test_returns_stored_locations(self, store, sample_records):
        stored = store.replace_all(sample_records)
        assert stored == store.get_locations()

    def test_ids_restart_after_replace(self, store, sample_records):
        store.replace_all(sample_records)
        store.replace_all(sample_records[:1])
        assert [loc.id for loc in store.get_locations()] == [1]

    def test_discards_previous_contents(self, populated_store, sample_records):
        populated_store.replace_all([sample_records[1]])
        assert [loc.osm_id for loc in populated_store.get_locations()] == ["way/2002"]

    def test_empty_batch_clears(self, populated_store):
        populated_store.replace_all([])
        assert populated_store.get_locations() == []
        assert len(populated_store) == 0

    def test_accepts_generator(self, store, sample_records):
        store.replace_all(record for record in sample_records)
        assert len(store) == 3


class TestCreate:
    def test_create_location_appends_next_id(self, populated_store):
        location = populated_store.create_location(
            LocationCreate(name="Morrison Planetarium", type="planetarium", latitude=37.77, longitude=-122.47)
        )
        assert location.id == 4
        assert len(populated_store) == 4

    def test_clear_resets_ids(self, populated_store, sample_records):
        populated_store.clear_locations()
        location = populated_store.create_location(sample_records[0])
        assert location.id == 1

    def test_ids_unique(self, store, sample_records):
        store.create_locations(sample_records)
        store.create_locations(sample_records)
        ids = [loc.id for loc in store.get_locations()]
        assert len(ids) == len(set(ids)) == 6


class TestReads:
    def test_snapshot_is_a_copy(self, populated_store):
        snapshot = populated_store.get_locations()
        snapshot.clear()
        assert len(populated_store.get_locations()) == 3

    def test_by_type_filters(self, populated_store):
        parks = populated_store.get_locations_by_type(LocationType.PARK)
        assert [loc.name for loc in parks] == ["Golden Gate Park"]

    def test_by_type_is_subset_of_all(self, populated_store):
        everything = populated_store.get_locations()
        for location_type in LocationType:
            subset = populated_store.get_locations_by_type(location_type)
            assert all(loc.type == location_type for loc in subset)
            assert all(loc in everything for loc in subset)

    def test_by_type_empty(self, populated_store):
        assert populated_store.get_locations_by_type(LocationType.PLANETARIUM) == []

    def test_by_osm_id(self, populated_store):
        location = populated_store.get_location_by_osm_id("way/2002")
        assert location is not None
        assert location.name == "Museum"

    def test_by_osm_id_missing(self, populated_store):
        assert populated_store.get_location_by_osm_id("node/999") is None

    def test_count_by_type(self, populated_store):
        counts = populated_store.count_by_type()
        assert list(counts) == list(LocationType)
        assert counts[LocationType.PLAYGROUND] == 1
        assert counts[LocationType.MUSEUM] == 1
        assert counts[LocationType.PARK] == 1
        assert counts[LocationType.SCIENCE_CENTER] == 0
        assert counts[LocationType.PLANETARIUM] == 0
