from unittest import mock

import pytest

from operatorkit.util import get_label_selector, get_operator_namespace, time_elapsed


def test_namespace_is_read_and_stripped(tmp_path):
    path = tmp_path / "namespace"
    path.write_text("  operators\n")
    assert get_operator_namespace(path) == "operators"


def test_namespace_accepts_string_path(tmp_path):
    path = tmp_path / "namespace"
    path.write_text("team-a")
    assert get_operator_namespace(str(path)) == "team-a"


def test_missing_namespace_file_raises():
    with pytest.raises(FileNotFoundError, match="cannot find namespace of the operator"):
        get_operator_namespace("/definitely/not/here/namespace")


def test_other_read_errors_propagate(tmp_path):
    with pytest.raises(OSError) as info:
        get_operator_namespace(tmp_path)
    assert not isinstance(info.value, FileNotFoundError)


def test_time_elapsed_prints_seconds(capsys):
    with mock.patch("time.perf_counter", side_effect=[1.0, 3.5]):
        with time_elapsed("work"):
            pass
    assert capsys.readouterr().out == "work took 2.5s\n"


def test_time_elapsed_prints_milliseconds(capsys):
    with mock.patch("time.perf_counter", side_effect=[0.0, 0.25]):
        with time_elapsed("step"):
            pass
    assert capsys.readouterr().out.endswith("took 250ms\n")


def test_time_elapsed_as_decorator(capsys):
    def job():
        return 42

    timed_job = time_elapsed("job")(job)
    assert timed_job() == 42
    assert capsys.readouterr().out.startswith("job took ")


def test_time_elapsed_reports_even_on_error(capsys):
    with pytest.raises(RuntimeError):
        with time_elapsed("failing"):
            raise RuntimeError("boom")
    assert capsys.readouterr().out.startswith("failing took ")


def test_get_label_selector_delegates():
    assert get_label_selector("", "x").empty()
    assert get_label_selector("app", "web").matches({"app": "web"})