import logging
from pathlib import Path
from typing import NamedTuple, Optional, Union

import yaml

from jpweather.utility import get_config_path

VALID_UNITS = ('si', 'us')
DEFAULT_UNITS = 'si'
DEFAULT_API_URL = 'https://api.pirateweather.net/forecast'


class ConfigLoadError(Exception):
    """Raised when the configuration file is missing or can't be parsed."""


class Config(NamedTuple):
    """ Settings read once from config.yml, passed to whatever needs them """
    api_key: str
    lat: str
    lng: str
    units: str = DEFAULT_UNITS
    api_url: str = DEFAULT_API_URL


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """
    Read the YAML configuration file, which looks like this

        forecastApiKey: <your key>
        home:
          lat: "35.6895"
          lng: "139.6917"
        units: si        # optional, si or us
        apiUrl: ...      # optional, any Dark Sky compatible endpoint

    :param path: location of the file, defaults to ~/.config/jpweather/config.yml
    :return: a Config
    :raises ConfigLoadError: when the file can't be read or is missing a setting
    """
    path = Path(path) if path is not None else get_config_path()
    logging.debug(f'Loading config from {path}')
    try:
        with open(path, encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigLoadError(f'{path}: {e.strerror or e}') from e
    except yaml.YAMLError as e:
        raise ConfigLoadError(f'{path} is not valid YAML: {e}') from e

    if not isinstance(raw, dict):
        raise ConfigLoadError(f'{path} must contain a mapping of settings')

    home = raw.get('home')
    if not isinstance(home, dict):
        raise ConfigLoadError(f'{path} is missing the home section (lat, lng)')

    units = _optional_str(raw, 'units', DEFAULT_UNITS).lower()
    if units not in VALID_UNITS:
        raise ConfigLoadError(f'units must be one of {", ".join(VALID_UNITS)}, not {units!r}')

    return Config(api_key=_required_str(raw, 'forecastApiKey'),
                  lat=_required_str(home, 'lat', 'home.lat'),
                  lng=_required_str(home, 'lng', 'home.lng'),
                  units=units,
                  api_url=_optional_str(raw, 'apiUrl', DEFAULT_API_URL).rstrip('/'))


def _required_str(data, key, name=None):
    value = data.get(key)
    # YAML reads unquoted coordinates as numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise ConfigLoadError(f'{name or key} is required in the config file')
    return value.strip()


def _optional_str(data, key, default):
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise ConfigLoadError(f'{key} must be a non-empty string')
    return value.strip()
