from school_admin.resources import ABSENCES, FEES
from school_admin.store.projection import matches
from school_admin.store.store import ResourceStore


def test_empty_query_returns_full_store_in_order(fee_records):
    store = ResourceStore(FEES, fee_records)

    assert store.project("").to_list() == store.records()
    assert store.project("   ").to_list() == store.records()


def test_query_is_case_insensitive(fee_records):
    store = ResourceStore(FEES, fee_records)

    result = store.project("cant").to_list()

    assert [r["feeName"] for r in result] == ["Cantine"]


def test_query_matches_description(fee_records):
    store = ResourceStore(FEES, fee_records)

    assert [r["feeId"] for r in store.project("BUS")] == ["F-2"]


def test_members_satisfy_predicate_and_refinement_is_subset(fee_records):
    store = ResourceStore(FEES, fee_records + [{"feeId": "F-3", "feeName": "Cantine soir", "amount": 2000}])

    broad = store.project("can")
    assert all(matches(r, "can", FEES.search_fields) for r in broad)

    narrow = broad.refine("soir")
    assert [r["feeId"] for r in narrow] == ["F-3"]
    assert all(r in broad.to_list() for r in narrow)


def test_projection_is_restartable_and_not_cached(fee_records):
    store = ResourceStore(FEES, fee_records)
    view = store.project("a")

    first = view.to_list()
    assert view.to_list() == first

    store.apply_created({"feeId": "F-3", "feeName": "Uniform", "amount": 1500, "description": "annual"})
    assert view.count() == len(first) + 1


def test_missing_search_fields_do_not_match():
    store = ResourceStore(ABSENCES, [{"id": "ABS-1", "reason": "Maladie", "date": "2024-05-15"}])

    assert store.project("luc").to_list() == []
    assert store.project("2024-05").count() == 1
