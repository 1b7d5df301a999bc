import sys
from pathlib import Path
from unittest import TestCase

from pytest import approx, mark

from jpweather import utility
from jpweather.utility import COMPASS_POINTS, calc_wdir, convert_wind_speed


@mark.parametrize("mph", [0, 1, 2.5, 10, 33.3, 120])
def test_convert_wind_speed(mph):
    assert convert_wind_speed(mph) == approx(mph * 0.447)


@mark.parametrize("bearing, expected", [
    (0, '北'),
    (11.2, '北'),
    (11.25, '北北東'),
    (45, '北東'),
    (90, '東'),
    (135, '南東'),
    (180, '南'),
    (225, '南西'),
    (270, '西'),
    (315, '北西'),
    (348.7, '北北西'),
    (348.75, '北'),
    (359.9, '北'),
    (360, '北'),
    (-20, '北北西'),
])
def test_calc_wdir(bearing, expected):
    assert calc_wdir(bearing) == expected


@mark.parametrize("bearing", [-400, -90, -11.3, 0, 7, 100.5, 200, 337.5, 359, 725])
def test_calc_wdir_wraps(bearing):
    assert calc_wdir(bearing) in COMPASS_POINTS
    assert calc_wdir(bearing) == calc_wdir(bearing + 360)


class TestUtility(TestCase):
    def test_compass_has_sixteen_points(self):
        assert len(COMPASS_POINTS) == 16
        assert len(set(COMPASS_POINTS)) == 16
        assert COMPASS_POINTS[0] == '北'
        assert COMPASS_POINTS[8] == '南'

    def test_read_float(self):
        assert utility.read_float(None) == 0.0
        assert utility.read_float(None, default=-1) == -1
        assert utility.read_float('2.5') == 2.5
        assert utility.read_float(3) == 3.0


def test_config_path_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv('HOME', str(tmp_path))
    assert utility.get_config_path() == tmp_path / '.config' / 'jpweather' / 'config.yml'


def test_home_falls_back_to_appdata_on_windows(monkeypatch, tmp_path):
    monkeypatch.setenv('HOME', '')
    monkeypatch.setenv('APPDATA', str(tmp_path))
    monkeypatch.setattr(sys, 'platform', 'win32')
    assert utility.get_home_dir() == tmp_path


def test_no_appdata_fallback_elsewhere(monkeypatch, tmp_path):
    monkeypatch.setenv('HOME', '')
    monkeypatch.setenv('APPDATA', str(tmp_path))
    monkeypatch.setattr(sys, 'platform', 'linux')
    assert utility.get_home_dir() == Path('')
