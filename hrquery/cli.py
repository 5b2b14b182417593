"""Command-line interface for heart rate queries.

Each command builds a heart rate request from its options, runs it against
the Fitbit API with tokens from a token file and writes the JSON response.
"""

import json
import logging
import sys
from pathlib import Path

import click

import hrquery.auth
import hrquery.heartrate
import hrquery.transport
from hrquery.errors import InvalidArgumentError


DEFAULT_TOKEN_FILE = '.fitbit_tokens.json'


@click.group()
@click.option(
    '--token-file',
    envvar='FITBIT_TOKEN_FILE',
    default=DEFAULT_TOKEN_FILE,
    help='File containing authentication tokens.',
)
@click.option(
    '--user-id',
    envvar='FITBIT_USER_ID',
    default='-',
    help='Encoded Fitbit user id; "-" means the authenticated user.',
)
@click.option('--verbose', '-v', is_flag=True, help='Log requested resource paths.')
@click.pass_context
def cli(ctx, token_file, user_id, verbose):
    """Query Fitbit heart rate time series."""
    ctx.ensure_object(dict)
    ctx.obj['token_file'] = token_file
    ctx.obj['user_id'] = user_id
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')


output_option = click.option(
    '--output',
    default=None,
    help='Output file for the JSON response (default: stdout).',
)


@cli.command('range')
@click.argument('start_date')
@click.argument('end_date')
@output_option
@click.pass_context
def range_(ctx, start_date, end_date, output):
    """Heart rate time series between START_DATE and END_DATE."""
    requests_ = _load_requests(ctx)
    _run(lambda: requests_.series_for_date_range(start_date, end_date), output)


@cli.command()
@click.argument('start_date')
@click.argument('period')
@output_option
@click.pass_context
def period(ctx, start_date, period, output):
    """Heart rate time series for PERIOD starting at START_DATE."""
    requests_ = _load_requests(ctx)
    _run(lambda: requests_.series_for_period(start_date, period), output)


@cli.command()
@click.option('--start-date', required=True, help='Start date (YYYY-MM-DD, "today" or "yesterday").')
@click.option('--end-date', default=None, help='End date (YYYY-MM-DD); excludes --period.')
@click.option('--period', default=None, help='Period such as 1d or 7d; excludes --end-date.')
@output_option
@click.pass_context
def series(ctx, start_date, end_date, period, output):
    """Heart rate time series for a date range or a period."""
    options = hrquery.heartrate.QueryOptions(
        start_date=start_date,
        end_date=end_date,
        period=period,
    )
    requests_ = _load_requests(ctx)
    _run(lambda: requests_.time_series(options), output)


@cli.command()
@click.option('--start-date', required=True, help='Start date (YYYY-MM-DD, "today" or "yesterday").')
@click.option('--end-date', default=None, help='End date (YYYY-MM-DD); defaults to a single day.')
@click.option(
    '--detail-level',
    default='1min',
    type=click.Choice(hrquery.heartrate.HR_DETAIL_LEVELS),
    help='Detail level for intraday data.',
)
@click.option('--start-time', default=None, help='Window start (HH:MM); requires --end-time.')
@click.option('--end-time', default=None, help='Window end (HH:MM); requires --start-time.')
@output_option
@click.pass_context
def intraday(ctx, start_date, end_date, detail_level, start_time, end_time, output):
    """Intraday heart rate data, optionally bounded to a time window."""
    options = hrquery.heartrate.QueryOptions(
        start_date=start_date,
        end_date=end_date,
        detail_level=detail_level,
        start_time=start_time,
        end_time=end_time,
    )
    requests_ = _load_requests(ctx)
    _run(lambda: requests_.intraday_time_series(options), output)


def _load_requests(ctx) -> hrquery.heartrate.HeartRateRequests:
    """Build HeartRateRequests from the group options.

    Args:
        ctx: Click context holding the token file and user id.

    Returns:
        HeartRateRequests backed by an authenticated FitbitTransport.

    Raises:
        SystemExit: If token file not found.
    """
    token_file = ctx.obj['token_file']
    if not Path(token_file).exists():
        click.echo(f'✗ Token file not found: {token_file}', err=True)
        click.echo('Please authenticate and save tokens first.', err=True)
        sys.exit(1)

    auth = hrquery.auth.FitbitAuth.from_token_file(token_file)
    transport = hrquery.transport.FitbitTransport(auth)
    return hrquery.heartrate.HeartRateRequests(transport, user_id=ctx.obj['user_id'])


def _run(fetch, output):
    """Run a heart rate request and write its JSON response.

    Args:
        fetch: Callable performing the request.
        output: Output file path, or None to print to stdout.

    Raises:
        SystemExit: If the arguments are invalid or the request fails.
    """
    try:
        data = fetch()
    except InvalidArgumentError as e:
        click.echo(f'✗ Invalid arguments: {e}', err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f'✗ Request failed: {str(e)}', err=True)
        sys.exit(1)

    if output is None:
        click.echo(json.dumps(data, indent=2))
        return

    with open(output, 'w') as f:
        json.dump(data, f, indent=2)
    click.echo(f'✓ Heart rate data saved to {output}')


if __name__ == '__main__':
    cli()
