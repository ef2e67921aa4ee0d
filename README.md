# beltworks

A collection of small, self-contained tools built around classic data
structures and line-oriented query processing. Three of them are
command-line programs that read queries and write answers to standard
output; the rest are importable building blocks.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command-line programs

### `beltworks-events` — event database

Reads commands from the file named as its first argument, or from standard
input when no argument is given. Each input line is a command:

```
Add 2017-06-01 1st of June
Add 2017-07-08 8th of July
Add 2017-07-08 Someone's birthday
Del date == 2017-07-08
Find event != "working day"
Last 2017-07-10
Print
```

- `Add <date> <event>` stores an event; an identical date and event pair is
  stored only once.
- `Del <condition>` removes matching entries and prints `Removed N entries`.
- `Find <condition>` prints matching entries, then `Found N entries`.
- `Last <date>` prints the most recently added event on the latest date not
  after the given one, or `No entries`.
- `Print` lists every entry as `YYYY-MM-DD event`, ordered by date and then
  by insertion.

Blank lines are skipped. Conditions compare `date` or `event` with `<`,
`<=`, `>`, `>=`, `==`, `!=`, combine with `AND` / `OR` (AND binds tighter)
and may use parentheses; event values are written in double quotes. An
empty condition matches everything. An unknown command or a malformed
condition raises `ValueError`.

### `beltworks-hotels` — hotel booking statistics

Reads standard input. The first word is the number of queries:

```
5
BOOK 10 FourSeasons 1 2
BOOK 10 Marriott 1 1
CLIENTS Marriott
ROOMS FourSeasons
ROOMS Marriott
```

`BOOK <time> <hotel> <client_id> <room_count>` records a booking.
`CLIENTS` and `ROOMS` report the distinct clients and the booked rooms of a
hotel among bookings made less than 86400 time units before the latest
booking.

### `beltworks-transit` — transit catalog

Reads standard input in two blocks, each starting with a line holding its
count: first the stops and routes, then the route queries.

```
3
Stop Tolstopaltsevo: 55.611087, 37.20829
Stop Marushkino: 55.595884, 37.209755
Bus 750: Tolstopaltsevo - Marushkino
1
Bus 750
```

Stop coordinates are latitude and longitude in degrees. A route written
with ` > ` is circular; one written with ` - ` goes there and back. The
answer looks like
`Bus 750: 3 stops on route, 2 unique stops, <length> route length`,
with the great-circle length in metres, or `Bus N: not found`.

## Library modules

- `beltworks.dates` — `Date` (ordered, printed as `YYYY-MM-DD`) and
  `parse_date`.
- `beltworks.tokens` — `tokenize` turns a condition into `Token`s of a
  `TokenType`; unrecognised characters are skipped.
- `beltworks.condition` — `parse_condition` builds a `Node` tree whose
  `evaluate(date, event)` answers a condition; `compare` applies a
  `Comparison`.
- `beltworks.database` — `Database` with `add`, `print_to`, `last`
  (raises `LookupError` when nothing qualifies), `find_if` and `remove_if`.
- `beltworks.events_cli` — `run(lines, out)` and `parse_event` behind
  `beltworks-events`.
- `beltworks.text_editor` — `Editor`, a cursor-based editor with `left`,
  `right`, `insert`, `cut`, `copy`, `paste` and `text`; `type_text` inserts
  a whole string.
- `beltworks.hotels` — `HotelManager` with `book`, `occupied_rooms` and
  `unique_clients`, and `run(stream, out)`.
- `beltworks.airport_counter` — `AirportCounter`, a counter over the
  members of an enum, with `get`, `insert`, `erase_one`, `erase_all` and
  `items`.
- `beltworks.server_stats` — `parse_request` into an `HttpRequest`, and
  `Stats` for tallying HTTP methods and URIs, with catch-all `UNKNOWN` and
  `unknown` buckets.
- `beltworks.merge_sort` — `merge_sort`, a stable in-place three-way merge
  sort.
- `beltworks.catalog` — `TransitCatalog`, `RouteData`, `Coord` and
  `calc_distance`.
- `beltworks.transit_requests` — `parse_request`, `process_query` and
  `run(stream, out)` behind `beltworks-transit`.
- `beltworks.synchronized` — `Synchronized`, a value reached through the
  `access()` context manager while a lock is held.
- `beltworks.text_parse` — `strip`, `read_token`, `split_by` and `join`.

Example:

```python
from beltworks.condition import parse_condition
from beltworks.database import Database
from beltworks.dates import parse_date

db = Database()
db.add(parse_date("2017-01-01"), "New Year")
db.add(parse_date("2017-03-08"), "Holiday")

node = parse_condition('date >= 2017-01-01 AND event != "Holiday"')
for date, event in db.find_if(node.evaluate):
    print(date, event)
```

## What it does not do

- The event database and the transit catalog live in memory only; nothing
  is saved between runs.
- The package has no income and expense tracker over date ranges, no
  general-purpose segment tree, no lock-per-bucket concurrent map and no
  keyword counter for text streams.