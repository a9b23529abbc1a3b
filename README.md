# tddkit

A collection of small, independent modules, each with a focused job and its
own test suite. No third-party dependencies.

## Installation

```
pip install tddkit
```

For running the tests:

```
pip install "tddkit[test]"
pytest
```

## Modules

### `tddkit.money`: multi-currency arithmetic

```python
from tddkit.money import Bank, dollar, franc

bank = Bank()
bank.add_rate("CHF", "USD", 2)

total = dollar(5).plus(franc(10))        # a Sum expression, not yet converted
print(bank.reduce(total, "USD"))         # Money(amount=10, currency='USD')
```

`Money(amount, currency)` is a frozen dataclass, so two amounts compare equal
when both amount and currency match. `dollar(amount)` and `franc(amount)`
build `USD` and `CHF` amounts. `Money`, `Sum` and the abstract `Expression`
all provide `plus(addend)`, `times(multiplier)` and `reduce(bank, to)`.

`Bank.add_rate(source, to, rate)` records that one unit of `to` costs `rate`
units of `source`; reducing divides by the rate, rounding toward zero.
`Bank.rate(source, to)` returns 1 when both currencies are the same and 0 for
a pair that has no rate, so reducing through an unknown pair raises
`ZeroDivisionError`. `Pair(source, to)` is the key rates are stored under.

Note that `Sum.times(multiplier)` scales the sum's addend and uses it for both
sides of the result.

### `tddkit.arith`

- `add(augend, addend)` returns the sum of two integers.
- `repeat(character, count)` returns the string repeated `count` times (empty
  for a count of zero or less).
- `sum_numbers(numbers)` totals an iterable of integers.
- `sum_all(*args)` returns a list with the total of each iterable given.

### `tddkit.greetings`

`hello(name)` returns `"Hello, <name>"`, or `"Hello, World"` for an empty
name. `greet(writer, name)` writes `"Hello, <name>"` to any text stream.
`GreeterHandler` answers every GET request with `Hello, world`, and
`make_server(host, port)` builds a threading HTTP server using it.

```
tddkit-greet
```

starts that server on port 5000 of every interface and runs until interrupted.

### `tddkit.shapes`

`Rectangle(width, height)`, `Circle(radius)` and `Triangle(base, height)` all
derive from `Shape` and provide `area()`. `perimeter(rectangle)` gives a
rectangle's perimeter.

### `tddkit.dictionary`

`Dictionary` is a `dict` of words to definitions with:

- `search(word)`, raising `WordNotFoundError` for an unknown word;
- `add(word, definition)`, raising `WordExistsError` if the word is present;
- `update(word, definition)` and `delete(word)`, raising
  `WordDoesNotExistError` for an unknown word.

All three errors derive from `DictionaryError`; the two for missing words are
also `LookupError`s.

### `tddkit.wallet`

`Wallet(balance=0)` keeps its balance in the `balance` attribute as a
`Bitcoin`, an `int` whose `str()` reads like `"10 BTC"`. `deposit(amount)`
adds to it; `withdraw(amount)` raises `InsufficientFundsError` and leaves the
balance unchanged when the amount is larger than the balance.

### `tddkit.countdown`

`countdown(out, sleeper)` writes `3`, `2`, `1` on separate lines and then
`Go!`, calling `sleeper.sleep()` before each. Any `Sleeper` subclass will do;
`ConfigurableSleeper(duration, sleep_fn)` calls `sleep_fn(duration)`.

```
tddkit-countdown
```

counts down on the terminal with one second between lines.

### `tddkit.counter`

`Counter` holds a `value` starting at 0; `inc()` adds one under a lock, so it
is safe to call from many threads.

### `tddkit.concurrency`

`check_websites(checker, urls)` runs `checker(url)` for every URL in a thread
pool and returns a dict mapping each URL to its result.

### `tddkit.racer`

`racer(a, b)` fetches both URLs at once (without proxies) and returns
whichever finishes first, giving up after ten seconds;
`configurable_racer(a, b, timeout)` takes the limit in seconds. A fetch that
fails still counts as finished. On timeout both raise `RacerTimeoutError`, a
`TimeoutError`.

### `tddkit.walker`

`walk(x, fn)` calls `fn` on every string found inside `x`, descending through
dataclass fields, mapping values, list, tuple and other iterable items
(including iterators), and the results of zero-argument callables. Other
values are ignored.

## What it does not do

The greeter server only answers GET requests with a fixed greeting; it takes
no configuration from the command line. Money supports only addition and
integer multiplication, with integer exchange rates.