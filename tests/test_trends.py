import pytest

from healthsync.trends import running_average, summarize, vitals_history


@pytest.fixture
def history(store):
    # keys deliberately out of date order
    store.set("vitals:u1:report_1", {"reportId": "report_1", "userId": "u1", "date": "2026-03-01T09:00:00+00:00",
                                     "systolic": 130, "diastolic": 86, "bloodPressure": "130/86",
                                     "bloodSugar": 110, "heartRate": 70})
    store.set("vitals:u1:report_3", {"reportId": "report_3", "userId": "u1", "date": "2026-01-01T09:00:00+00:00",
                                     "systolic": 120, "diastolic": 80, "bloodPressure": "120/80",
                                     "bloodSugar": 90})
    store.set("vitals:u1:report_2", {"reportId": "report_2", "userId": "u1", "date": "2026-02-01T09:00:00+00:00",
                                     "heartRate": 80, "hba1c": 5.8})
    store.set("vitals:u2:report_9", {"reportId": "report_9", "userId": "u2", "date": "2026-01-05T09:00:00+00:00",
                                     "heartRate": 120})
    return vitals_history(store, "u1")


def test_history_is_date_ordered(history):
    assert list(history["reportId"]) == ["report_3", "report_2", "report_1"]


def test_summary_skips_missing_values(history):
    s = summarize(history)
    assert s["systolic"] == {"latest": 130, "average": 125, "count": 2}
    assert s["diastolic"] == {"latest": 86, "average": 83, "count": 2}
    assert s["heartRate"] == {"latest": 70, "average": 75, "count": 2}
    assert s["hba1c"] == {"latest": 5.8, "average": 5.8, "count": 1}
    assert s["bloodPressure"] == {"latest": "130/86"}
    assert "weight" not in s
    assert "temperature" not in s


def test_blood_sugar_status(history):
    assert summarize(history)["bloodSugar"] == {"latest": 110, "average": 100, "count": 2, "status": "Monitor"}
    assert summarize(history.iloc[:2])["bloodSugar"]["status"] == "Normal"


def test_running_average(history):
    assert list(running_average(history, "systolic")) == [120.0, 120.0, 125.0]


def test_unknown_user_is_empty(store):
    h = vitals_history(store, "nobody")
    assert h.empty
    assert summarize(h) == {}
