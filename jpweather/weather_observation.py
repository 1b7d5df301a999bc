import datetime as dt
import logging
from types import MappingProxyType
from typing import List

import requests

from jpweather.config import DEFAULT_API_URL, DEFAULT_UNITS
from jpweather.utility import read_float

__all__ = ['FetchError', 'Observation', 'Weather', 'WEATHER_ICONS', 'icon_for']

EXCLUDED_BLOCKS = ['currently', 'minutely', 'daily', 'alerts', 'flags']

WEATHER_ICONS = MappingProxyType({
    'clear-day': '☀',
    'clear-night': '🌙',
    'rain': '☔',
    'snow': '☃',
    'sleet': '❄',
    'wind': '🍃',
    'fog': '🌁',
    'cloudy': '☁',
    'partly-cloudy-day': '☀/☁',
    'partly-cloudy-night': '🌙/☁',
    'hail': '❅',
    'thunderstorm': '☇',
})


def icon_for(condition, icons=WEATHER_ICONS):
    """ Glyph for a condition code, blank when the code isn't one we know """
    return icons.get(condition, '')


class FetchError(Exception):
    """Raised when the forecast can't be retrieved from the weather service."""


class Observation:
    """ One hour of forecast data """

    def __init__(self, timestamp: dt.datetime, icon: str = '', temperature: float = 0,
                 precip_probability: float = 0, wind_bearing: float = 0, wind_speed: float = 0):
        self.timestamp = timestamp
        self.icon = icon
        self.temperature = temperature
        self.precip_probability = precip_probability
        self.wind_bearing = wind_bearing
        self.wind_speed = wind_speed

    @property
    def hour(self):
        return self.timestamp.hour

    def __str__(self):
        return f'Observation at {self.timestamp:%Y-%m-%d %H:00}: {self.icon or "?"} ' \
            f'{self.temperature}°, precip {self.precip_probability}, ' \
            f'wind {self.wind_speed} from {self.wind_bearing}°'

    def __repr__(self):
        return '{0} ({1})'.format(object.__repr__(self), str(self))

    @classmethod
    def from_darksky(cls, f: dict) -> 'Observation':
        """ Build an observation from one entry of the hourly data block """
        return cls(timestamp=dt.datetime.fromtimestamp(f.get('time', 0)),
                   icon=str(f.get('icon') or ''),
                   temperature=read_float(f.get('temperature')),
                   precip_probability=read_float(f.get('precipProbability')),
                   wind_bearing=read_float(f.get('windBearing')),
                   wind_speed=read_float(f.get('windSpeed')))


class Weather:
    """ Client for a Dark Sky compatible forecast service """

    def __init__(self, api_key, lat, lng, units=DEFAULT_UNITS, base_url=DEFAULT_API_URL, session=None):
        self.api_key = api_key
        self.lat = lat
        self.lng = lng
        self.units = units
        self.base_url = base_url
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_config(cls, config, session=None):
        return cls(config.api_key, config.lat, config.lng, units=config.units,
                   base_url=config.api_url, session=session)

    @property
    def url(self):
        return f'{self.base_url}/{self.api_key}/{self.lat},{self.lng}'

    def get_darksky_weather(self) -> dict:
        """
        Ask the service for the forecast starting now
        :return: the decoded JSON response
        :raises FetchError: on any network, HTTP or decoding problem
        """
        logging.debug(f'Going out to {self.base_url} for {self.lat},{self.lng} ({self.units})')
        try:
            resp = self._session.get(self.url, params={'exclude': ','.join(EXCLUDED_BLOCKS),
                                                       'units': self.units})
        except requests.RequestException as e:
            raise FetchError(f'request failed: {e}') from e

        if resp.status_code != 200:
            raise FetchError(f'bad response from the forecast service {resp.status_code}')

        try:
            return resp.json()
        except ValueError as e:
            raise FetchError('the forecast service returned something that is not JSON') from e

    def get_forecast(self) -> List[Observation]:
        """ The hourly forecast, in the order the service returned it """
        dct = self.get_darksky_weather()
        try:
            return self._build_observations_from_darksky_json(dct)
        except (TypeError, ValueError, AttributeError, OverflowError, OSError) as e:
            raise FetchError(f'the forecast service returned data that could not be read: {e}') from e

    @staticmethod
    def _build_observations_from_darksky_json(dct) -> List[Observation]:
        hourly = dct.get('hourly') if isinstance(dct, dict) else None
        if not isinstance(hourly, dict):
            logging.warning('The forecast service returned no hourly data')
            return []
        observations = [Observation.from_darksky(f) for f in hourly.get('data') or []]
        logging.debug(f'Received {len(observations)} hourly observations')
        return observations
