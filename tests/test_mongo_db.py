from datetime import datetime, timezone

import pytest

from logic.mongo_db import MongoDB


def _case(case_id, owner, day, title="T"):
    return {
        "_id": case_id,
        "title": title,
        "created_by": owner,
        "created_at": datetime(2024, 1, day, tzinfo=timezone.utc),
    }


def test_missing_uri_raises(monkeypatch):
    monkeypatch.delenv("MONGO_URI", raising=False)
    with pytest.raises(RuntimeError):
        MongoDB()


def test_list_filters_by_owner_newest_first(repo, fake_db):
    cases = fake_db["case_config"]
    cases.docs += [
        _case("old", "a@x.edu", 1),
        _case("other", "b@x.edu", 2),
        _case("new", "a@x.edu", 3),
        _case("upper", "A@x.edu", 4),
    ]

    result = repo.list_cases("a@x.edu")

    assert result.ok
    assert [c.case_id for c in result.data] == ["new", "old"]
    assert result.data[0].created_by == "a@x.edu"
    assert result.data[0].created_at == datetime(2024, 1, 3, tzinfo=timezone.utc)


def test_insert_assigns_timestamp_and_owner(repo, fake_db):
    result = repo.insert_case("skims", "Skims", "a@x.edu")

    assert result.ok
    doc = fake_db["case_config"].docs[0]
    assert doc["_id"] == "skims"
    assert doc["title"] == "Skims"
    assert doc["created_by"] == "a@x.edu"
    assert isinstance(doc["created_at"], datetime)


def test_duplicate_insert_is_reported(repo, fake_db):
    repo.insert_case("skims", "First", "a@x.edu")
    result = repo.insert_case("skims", "Second", "b@x.edu")

    assert not result.ok
    assert "skims" in result.error
    assert [d["title"] for d in fake_db["case_config"].docs] == ["First"]


def test_driver_errors_become_failures(repo, fake_db):
    fake_db.failures.add(("case_config", "find"))
    result = repo.list_cases("a@x.edu")
    assert not result.ok
    assert result.data == []
    assert "find" in result.error


def test_delete_responses_only_touches_that_case(repo, fake_db):
    responses = fake_db["responses"]
    responses.docs += [{"case_id": "a"}, {"case_id": "a"}, {"case_id": "b"}]

    assert repo.delete_responses("a").ok
    assert responses.docs == [{"case_id": "b"}]


def test_delete_case(repo, fake_db):
    fake_db["case_config"].docs.append(_case("a", "a@x.edu", 1))
    assert repo.delete_case("a").ok
    assert fake_db["case_config"].docs == []


def test_ensure_indexes_tolerates_failure(repo, fake_db):
    fake_db.failures.add(("case_config", "create_index"))
    repo.ensure_indexes()
    assert fake_db["case_config"].indexes == []
