import threading
import time

import pytest

from mobility_survey import survey
from mobility_survey.io import LoadError
from mobility_survey.survey import SurveyData

CSV = "\n".join(
    [
        "participant_id,employment_status,semester_time,vehicle,is_main_vehicle",
        "1,student,WS24,car-driver,true",
        "1,student,WS24,car-driver,true",
        "2,student,WS24,bus,true",
        "2,student,WS24,walk,false",
        "3,other,WS24,bus,true",
    ]
)


class _CountingReader:
    def __init__(self, text=CSV, delay=0.0):
        self.text = text
        self.delay = delay
        self.calls = 0

    def __call__(self, source):
        self.calls += 1
        time.sleep(self.delay)
        return self.text


def _failing_reader(source):
    raise LoadError(source, 503)


def test_survey_data__distinct_usage_scenario():
    data = SurveyData("memory", "coarse", reader=_CountingReader())
    usage = {(r.period, r.group, r.vehicle): r.people for r in data.usage_by_group()}
    assert usage == {
        ("WS24", "student", "car-driver"): 1,
        ("WS24", "student", "bus"): 1,
        ("WS24", "student", "walk"): 1,
    }


def test_survey_data__status_scheme_keeps_other():
    data = SurveyData("memory", "status", reader=_CountingReader())
    groups = {r.group for r in data.usage_by_group()}
    assert groups == {"student", "other"}


def test_survey_data__modal_split():
    data = SurveyData("memory", "coarse", reader=_CountingReader())
    modal = data.modal_split()
    counts = {r.vehicle: r.count for r in modal["WS24"]}
    assert counts == {"car-driver": 2, "bus": 2}


def test_survey_data__results_are_read_only():
    data = SurveyData("memory", "coarse", reader=_CountingReader())
    with pytest.raises(TypeError):
        data.modal_split()["WS24"] = ()
    assert isinstance(data.load_rows(), tuple)
    assert isinstance(data.usage_by_group(), tuple)


def test_survey_data__idempotent_with_single_retrieval():
    reader = _CountingReader()
    data = SurveyData("memory", "coarse", reader=reader)

    rows = data.load_rows()
    modal = data.modal_split()
    usage = data.usage_by_group()

    assert data.load_rows() is rows
    assert data.modal_split() is modal
    assert data.usage_by_group() is usage
    assert data.modal_split() == modal
    assert reader.calls == 1


def test_survey_data__concurrent_first_access():
    reader = _CountingReader(delay=0.05)
    data = SurveyData("memory", "coarse", reader=reader)
    calls = [data.load_rows, data.modal_split, data.usage_by_group] * 4
    threads = [threading.Thread(target=call) for call in calls]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert reader.calls == 1


def test_survey_data__load_error_propagates_to_all_entry_points():
    data = SurveyData("https://example.org/data.csv", "coarse", reader=_failing_reader)
    for call in [data.load_rows, data.modal_split, data.usage_by_group]:
        with pytest.raises(LoadError) as exc_info:
            call()
        assert exc_info.value.status == 503


def test_survey_data__load_error_is_terminal():
    calls = []

    def _reader(source):
        calls.append(source)
        if len(calls) == 1:
            raise LoadError(source, 500)
        return CSV

    data = SurveyData("memory", "coarse", reader=_reader)
    with pytest.raises(LoadError):
        data.modal_split()
    with pytest.raises(LoadError):
        data.load_rows()
    assert len(calls) == 1


def test_survey_data__unknown_scheme():
    with pytest.raises(ValueError):
        SurveyData("memory", "merged", reader=_CountingReader())


def test_default_instance(monkeypatch, tmp_path):
    path = tmp_path / "data_vehicle.csv"
    path.write_text(CSV, encoding="utf-8")
    monkeypatch.setattr(survey.config, "DATA_SOURCE", str(path))
    monkeypatch.setattr(survey.config, "GROUP_SCHEME", "coarse")
    monkeypatch.setattr(survey, "_default", None)

    rows = survey.load_rows()
    assert len(rows) == 5
    assert survey.load_rows() is rows
    assert survey.get_default() is survey.get_default()
    assert len(survey.modal_split()["WS24"]) == 2
    assert len(survey.usage_by_group()) == 3
