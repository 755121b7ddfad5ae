# wthr

`wthr` is an interactive prompt for exploring hourly temperature datasets.
It loads a CSV file of readings for one or more countries, averages them by
day, month and year, and lets you narrow down to a country, year, month, day
or hour. From there it prints mean temperatures, draws text line charts and
candlestick charts, and extends a series with a simple seasonal prediction.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

## Starting

```
wthr
```

By default datasets are looked for in a `datasets/` directory under the
current directory. Another directory can be given:

```
wthr --datasets path/to/datasets
```

You get a `> ` prompt. Type `help` to list the commands, or `help <command>`
for details on one. The program ends on `exit` or at the end of input. A
command name that is not known prints the list of available commands; a
command that fails prints `<command> failed` followed by its help.

## Datasets

A dataset is a CSV file inside the datasets directory. The first row is a
header: the first column holds the timestamp and every further column is a
country, identified by the first two characters of its column name. Each
following row holds a timestamp of the form `YYYY-MM-DDTHH...` and one
temperature per country. Blank lines are skipped; a row with more values than
the header has columns is an error.

```
utc_timestamp,AT_temperature,BE_temperature
2015-01-01T00:00:00Z,-3.64,0.51
2015-01-01T01:00:00Z,-3.80,0.35
```

Loading a further file adds its countries to those already loaded, replacing
any country with the same code.

## Commands

| Command | What it does |
| --- | --- |
| `load [file]` | Load a dataset from the datasets directory; with no name, the first file in alphabetical order. Prints how many hourly data points were loaded. |
| `list <scope>` | List the countries, years, months, days or hours available one level below the current selection. |
| `select <scope> <id>` | Select a `country`, `year`, `month`, `day` or `hour`. Scopes are entered in order: a country before a year, a year before a month, and so on. |
| `select <scope>` | Widen the selection back out to a higher scope. |
| `select date dd/mm/yyyy` | Jump straight to a day of the selected country. |
| `scope` | Show the current selection. |
| `show temp` | Print the mean temperature of the selected year, month, day or hour. |
| `show plot` | Draw a line chart of the selection (country down to day scope). |
| `show prediction [count]` | Draw the selection followed by a seasonal forecast, marked `x` (country down to day scope; count defaults to 12). |
| `show candles` | Draw a candlestick chart: one candle per year, 30 days or day (country down to month scope). |
| `help [command]` | Show usage. |
| `exit` | Leave the program. |

## Example session

```
> load weather.csv
> select country AT
> list year
> select year 2016
> show temp
> show plot
> show prediction 6
> select date 14/02/2016
> show temp
> exit
```

## Using it as a library

The pieces behind the prompt can be used directly:

- `wthr.parsing.load_dataset(path)` reads a CSV file into a dict of
  `wthr.models.TempTimeline`, one per country code. Each timeline holds
  `hourly_readings`, `daily_readings`, `monthly_readings` and
  `yearly_readings`, keyed by the `Hour`, `Day`, `Month` and `Year`
  timestamps in `wthr.models`.
- `wthr.processing.predict_seasonal(data, season_length, recent_length, prediction_count)`
  forecasts a series from its seasonal averages shifted by the recent
  deviation from them; `wthr.processing.compute_candles(data, candle_size)`
  cuts a series into `Candlestick` values.
- `wthr.visuals.plot`, `wthr.visuals.prediction` and
  `wthr.visuals.candlesticks` take a timeline and a
  `wthr.models.DataScopeState` and return a `wthr.visuals.Canvas`, whose
  `render()` gives the chart as text; `wthr.visuals.temp` returns the mean
  temperature of the selection.
- `wthr.app.App` runs the prompt one line at a time over any text streams.

## What it does not do

Charts are printed as plain text below the prompt; there is no full-screen
or interactive display, and no colour. Datasets are only read from local CSV
files in the layout above; nothing is downloaded or saved.