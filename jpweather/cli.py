"""Console script for jpweather."""
import logging
import sys

import click

from jpweather import configure_logging
from jpweather.config import DEFAULT_UNITS, ConfigLoadError, load_config
from jpweather.report import DayReport
from jpweather.utility import get_config_path
from jpweather.weather_observation import FetchError, Weather

MAX_DAYS = 2

Colors = {'Error': 'red'}


def show_forecast(observations, out, units=DEFAULT_UNITS, max_days=MAX_DAYS) -> int:
    """
    Print a table for each complete day in the forecast
    :param observations: hourly observations in time order
    :param out: a text stream to print to
    :param units: the unit system the observations came back in
    :param max_days: stop once this many days have been printed
    :return: the number of days printed
    """
    report = DayReport(units=units)
    shown = 0
    for obs in observations:
        report.add(obs)
        if report.is_end_of_day:
            report.render(out)
            report.reset()
            shown += 1
            if shown == max_days:
                break
    if len(report):
        logging.debug(f'Skipping {len(report)} hours after the last full day')
    return shown


@click.command('jpweather')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None,
              help=f'configuration file to use (default {get_config_path()})')
@click.option('-v', '--verbose', is_flag=True, help='show debug messages')
def main(config_path, verbose):
    """ Print the hourly forecast for home, one table per day """
    configure_logging(verbose)
    try:
        config = load_config(config_path)
    except ConfigLoadError as e:
        click.secho(f'Config file load Error: {e}\nPlease create a config file.', fg=Colors['Error'])
        sys.exit(1)

    try:
        observations = Weather.from_config(config).get_forecast()
    except FetchError as e:
        click.secho(f'API Error: {e}', fg=Colors['Error'])
        sys.exit(1)

    show_forecast(observations, sys.stdout, units=config.units)


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover
