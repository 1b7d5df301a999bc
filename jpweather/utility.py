import math
import os
import sys
from pathlib import Path

CONFIG_DIR_NAME = 'jpweather'
CONFIG_FILE_NAME = 'config.yml'

MPH_TO_MS = 0.447

COMPASS_POINTS = ('北', '北北東', '北東', '東北東', '東', '東南東', '南東', '南南東',
                  '南', '南南西', '南西', '西南西', '西', '西北西', '北西', '北北西')


def convert_wind_speed(mph):
    """ Convert a wind speed in miles per hour to meters per second """
    return mph * MPH_TO_MS


def calc_wdir(bearing):
    """
    Turn a wind bearing into one of the 16 compass points, starting at North and going clockwise
    :param bearing: bearing in degrees, values outside 0-360 wrap around
    :return: the Japanese name of the compass point
    """
    val = math.floor((bearing / 22.5) + .5)
    return COMPASS_POINTS[(val % 16)]


def read_float(value, default=0.0):
    return default if value is None else float(value)


def get_home_dir() -> Path:
    """ The directory used as the user's home, APPDATA stands in for HOME on Windows """
    home = os.getenv('HOME', '')
    if home == '' and sys.platform == 'win32':
        home = os.getenv('APPDATA', '')
    return Path(home)


def get_config_path() -> Path:
    """ Full path to the per-user configuration file """
    return get_home_dir() / '.config' / CONFIG_DIR_NAME / CONFIG_FILE_NAME
