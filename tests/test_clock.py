import datetime as dt

from slstatus.components.clock import datetime


def test_datetime_date_format():
    before = dt.datetime.now().replace(microsecond=0)
    result = datetime("%F %T")
    after = dt.datetime.now()
    parsed = dt.datetime.strptime(result, "%Y-%m-%d %H:%M:%S")
    assert before <= parsed <= after
    assert len(result) == 19


def test_datetime_literal_text():
    assert datetime("status") == "status"


def test_datetime_empty_result_warns(capsys):
    assert datetime("") is None
    assert "strftime" in capsys.readouterr().err


def test_datetime_too_long():
    assert datetime("x" * 2000) is None