"""Collects one day of hourly observations and prints it as a table."""
import logging

import click
from rich import box
from rich.console import Console
from rich.table import Table

from jpweather.config import DEFAULT_UNITS
from jpweather.utility import calc_wdir, convert_wind_speed
from jpweather.weather_observation import WEATHER_ICONS, Observation, icon_for

LAST_HOUR = 23
HEADER_WIDTH = 14
# Wide enough that a full day of columns never wraps
TABLE_WIDTH = 400


class RowLabels:
    """ First cell of each row of the day table """
    HOUR = '時間'
    WEATHER = '天気'
    TEMPERATURE = '気温'
    PRECIP = '降水確率(%)'
    WIND_DIR = '風向'
    WIND_SPEED = '風速(m/s)'
    in_order = (HOUR, WEATHER, TEMPERATURE, PRECIP, WIND_DIR, WIND_SPEED)


class DayReport:
    """
    The rows of the table for the day being built.  Every row starts with its label and gets one
    cell per observation added, so all rows always have the same length.
    """

    def __init__(self, units=DEFAULT_UNITS, icons=WEATHER_ICONS):
        self.units = units
        self.icons = icons
        self.reset()

    def reset(self):
        self.date = None
        self.last_hour = None
        self.hours = [RowLabels.HOUR]
        self.weathers = [RowLabels.WEATHER]
        self.temperatures = [RowLabels.TEMPERATURE]
        self.precip_probabilities = [RowLabels.PRECIP]
        self.wind_bearings = [RowLabels.WIND_DIR]
        self.wind_speeds = [RowLabels.WIND_SPEED]

    @property
    def rows(self):
        return [self.hours, self.weathers, self.temperatures, self.precip_probabilities,
                self.wind_bearings, self.wind_speeds]

    @property
    def is_end_of_day(self):
        return self.last_hour == LAST_HOUR

    def __len__(self):
        """ Number of observations added since the last reset """
        return len(self.hours) - 1

    def add(self, obs: Observation):
        if self.date is None:
            self.date = obs.timestamp.date()
        self.last_hour = obs.hour

        wind_speed = obs.wind_speed
        if self.units == 'us':
            wind_speed = convert_wind_speed(wind_speed)

        self.hours.append(f'{obs.hour:02d}')
        self.weathers.append(icon_for(obs.icon, self.icons))
        self.temperatures.append(f'{obs.temperature:.1f}')
        # Scaled by 1000, which is how this column has always been shown, at single precision
        self.precip_probabilities.append(format(obs.precip_probability * 1000, '.7g'))
        self.wind_bearings.append(calc_wdir(obs.wind_bearing))
        self.wind_speeds.append(f'{wind_speed:.1f}')

    def header_lines(self):
        d = self.date
        label = f'{d.year}-{d.month:02d}-{d.day}' if d is not None else ''
        return ['┌' + '─' * HEADER_WIDTH + '┐',
                f'│ {label:<{HEADER_WIDTH - 2}} │',
                '└' + '─' * HEADER_WIDTH + '┘']

    def build_table(self) -> Table:
        table = Table(box=box.SIMPLE, show_edge=False, pad_edge=False)
        for hour in self.hours:
            table.add_column(hour, justify='center', no_wrap=True)
        for row in self.rows[1:]:
            table.add_row(*row)
        return table

    def render(self, out):
        """
        Write the date header, the table and two blank lines to out
        :param out: a text stream
        """
        logging.debug(f'Rendering {self.date} with {len(self)} hours')
        for line in self.header_lines():
            click.echo(line, file=out)
        console = Console(file=out, width=TABLE_WIDTH, markup=False, emoji=False,
                          highlight=False, color_system=None)
        console.print(self.build_table())
        click.echo('\n', file=out)
