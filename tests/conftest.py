import datetime as dt

from pytest import fixture

from jpweather.weather_observation import Observation

START = dt.datetime(2024, 1, 15, 0)
CONDITIONS = ['clear-night', 'partly-cloudy-night', 'cloudy', 'rain', 'partly-cloudy-day', 'clear-day']


def hourly_observations(count, start=START):
    """ count observations, one per hour, beginning at start """
    return [Observation(timestamp=start + dt.timedelta(hours=h),
                        icon=CONDITIONS[h % len(CONDITIONS)],
                        temperature=10 + h / 4,
                        precip_probability=(h % 10) / 10,
                        wind_bearing=(h * 22.5) % 360,
                        wind_speed=h % 7)
            for h in range(count)]


def hourly_json(count, start=START):
    """ The hourly block of a forecast response holding count hours """
    return {'latitude': 35.6895, 'longitude': 139.6917,
            'hourly': {'summary': 'Rain tomorrow.', 'icon': 'rain',
                       'data': [{'time': int((start + dt.timedelta(hours=h)).timestamp()),
                                 'icon': CONDITIONS[h % len(CONDITIONS)],
                                 'temperature': 10 + h / 4,
                                 'precipProbability': (h % 10) / 10,
                                 'windBearing': (h * 22.5) % 360,
                                 'windSpeed': h % 7}
                                for h in range(count)]}}


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """ Stands in for requests.Session, remembering every request made """

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        if self.error is not None:
            raise self.error
        return self.response


@fixture
def two_days():
    return hourly_observations(48)


@fixture
def config_file(tmp_path):
    path = tmp_path / 'config.yml'
    path.write_text('forecastApiKey: abc123\n'
                    'home:\n'
                    '  lat: "35.6895"\n'
                    '  lng: "139.6917"\n', encoding='utf-8')
    return path
