import platformdirs
import pytest
import responses

from coordalt.altitude import API_URL
from coordalt.cli import main, parse_coordinate


@pytest.fixture
def cache_dir(tmp_path, monkeypatch):
    target = tmp_path / "cache"
    monkeypatch.setattr(platformdirs, "user_cache_path", lambda *a, **k: target)
    return target


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_parse_comma_form():
    assert parse_coordinate(["1.5,2.5"]) == (1.5, 2.5)


def test_parse_two_arguments():
    assert parse_coordinate(["-12.25", "100"]) == (-12.25, 100.0)


def test_parse_both_forms_agree():
    assert parse_coordinate(["34.324,1.88832"]) == parse_coordinate(["34.324", "1.88832"])


@pytest.mark.parametrize(
    "args",
    [[], ["1.5"], ["a", "b"], ["1", "2", "3"], ["1, 2"], ["1,x"]],
)
def test_parse_errors(args):
    with pytest.raises(ValueError):
        parse_coordinate(args)


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().err


def test_main_out_of_range(capsys, cache_dir):
    assert main(["95", "10"]) == 1
    assert "out of range" in capsys.readouterr().err


def test_main_prints_altitude(capsys, cache_dir, mocked):
    mocked.add(
        responses.GET,
        API_URL,
        json={"results": [{"latitude": 43, "longitude": 8, "elevation": 120.5}]},
    )
    assert main(["43,8"]) == 0
    assert capsys.readouterr().out.strip() == "altitude for (43;8) is 120.5m"


def test_main_fetch_failure(capsys, cache_dir, mocked):
    mocked.add(responses.GET, API_URL, status=500)
    mocked.add(responses.POST, API_URL, status=500)
    assert main(["43", "8"]) == 1
    assert "usage:" in capsys.readouterr().err