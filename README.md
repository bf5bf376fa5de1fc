# calc128

calc128 evaluates arithmetic expressions with 34-digit decimal arithmetic. It
checks each expression strictly before computing anything, and it can report
how long each calculation took.

## Supported syntax

- Numbers with an optional decimal point: `3`, `2.5`, `.75`
- Operators: `^` (power), `*`, `/`, `+`, `-`
- Parentheses for grouping. Implicit multiplication is applied after a closing
  parenthesis and between a number and an opening parenthesis: `2(3+4)`,
  `(1+1)(2+2)`
- Unary minus in front of a number, a decimal point or a parenthesis: `-3`,
  `-.5`, `-(2+1)`
- Spaces and tabs are ignored

Within a group, powers are applied first (right to left), then multiplication
and division, then addition and subtraction; innermost parentheses are
evaluated first.

## Installation

```
pip install .
```

## Command line

```
calc128 "2(3+4)^2" "1/3"
```

Each expression given as an argument is evaluated and its result printed on a
line of its own. With no arguments, `calc128` reads one expression per line
from standard input, skipping blank lines.

Options:

- `-p N`, `--precision N`: digits after the decimal point (default 6)
- `-t`, `--time`: print the elapsed time after each successful result

An expression that fails validation or cannot be evaluated (for example a
division by zero) prints `UNDEFINED ERROR(calculationResult)`, and the command
then exits with status 1; otherwise it exits with status 0.

## Library use

```python
from calc128.validate import check_input, is_valid_input
from calc128.tokenize import tokenize
from calc128.calculate import calculate, format_number
from calc128.inputs import wrap_input, clean_input

text = clean_input(wrap_input("2 (3 + 4) ^ 2"))
check_input(text)                # raises ValidationError on bad input
value = calculate(tokenize(text))
print(format_number(value, 10))  # 98
```

- `calc128.inputs`: `wrap_input` encloses text in an outer pair of
  parentheses; `clean_input` removes spaces and tabs.
- `calc128.validate`: `check_input` raises `ValidationError` (a `ValueError`)
  with the reason; `is_valid_input`, `is_valid_first`, `is_valid_par` and
  `is_valid_syntax` return `True` or `False` and log the reason.
- `calc128.tokenize`: `tokenize` splits a cleaned expression into a list of
  number, operator and parenthesis strings, making implicit products explicit.
- `calc128.calculate`: `calculate` evaluates a parenthesised token list and
  returns a `decimal.Decimal`; it raises `ZeroDivisionError` on division by
  zero. `format_number` renders a value with a given number of significant
  digits, in the style of `%g`.
- `calc128.output`: `calculation_result(context, text)` runs the whole
  pipeline, stores the input, tokens, result and elapsed time on a
  `calc128.context.Context`, and returns the result formatted with
  `context.user_precision` decimal places, or the error text above.
  `format_elapsed` turns a duration in microseconds into text such as
  `Elapsed Time: 12 µs`.

## What it does not do

There is no graphical window: calc128 works only on the command line and as a
library. Letters and variables are not accepted in expressions.

## Running the tests

```
pip install ".[test]"
pytest
```