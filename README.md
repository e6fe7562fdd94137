# lipskit

The building blocks of a small Lisp in the Interlisp tradition: interned
symbols with value cells and property lists, cons cells, a read syntax table,
and the primitive functions that operate on them.

## Installation

```sh
pip install .
```

## Data model

`lipskit.types` defines the objects:

- `nil` is Python's `None`. `is_nil(obj)` tests for it.
- `Symbol`: a literal atom with `pname`, a `value` cell, a `plist` and a
  `constant` flag. Symbols are looked up or created with `intern(pname)`; the
  same name always gives back the same symbol. `exists(pname)` checks the
  symbol table and `unintern(pname)` removes a name from it. A new symbol's
  value is the sentinel `UNBOUND`. `T` is the symbol `t`, bound to itself and
  constant: assigning to the value of a constant symbol raises `LispError`.
- `Cons`: a mutable pair with `car` and `cdr`. `cons(car, cdr)` builds one and
  `mklist(*args)` builds a proper list (`mklist()` is `None`). Iterating over
  a `Cons` yields the car of each cell until the tail is not a cons. The
  `repr` of a cons is its Lisp printed form, e.g. `(a b . c)`.
- Integers, floats and strings are Python's `int`, `float` and `str`.
- `type_of(obj)` returns an `ObjectType`. An object may declare its kind with
  a `lisp_type` attribute holding an `ObjectType`; otherwise any other callable
  counts as `SUBR`. Booleans and unknown objects raise `TypeError`.
- Wrong argument types given to primitives raise `LispError`.

```python
from lipskit.types import intern, mklist
from lipskit.lists import car, nth, append, length

abc = mklist(intern("a"), intern("b"), intern("c"))
car(abc)                            # a
nth(abc, 2)                         # (b c)
length(abc)                         # 3
append(mklist(abc, mklist(1, 2)))   # (a b c 1 2)
```

## Modules

| Module               | Contents |
|----------------------|----------|
| `lipskit.types`      | `Symbol`, `Cons`, `ObjectType`, `LispError`, `T`, `UNBOUND`, `intern`, `unintern`, `exists`, `type_of`, `is_nil`, `cons`, `mklist` |
| `lipskit.lists`      | `car`, `cdr` and their compositions up to three levels, `rplaca`, `rplacd`, `nconc`, `tconc`, `attach`, `append`, `null`, `length`, `nth` |
| `lipskit.predicate`  | `eq`, `neq`, `equal`, `atom`, `numberp`, `listp`, `nlistp`, `memb`, `boundp`, `litatom`, `xtypeof` |
| `lipskit.property`   | `setplist`, `getplist`, `putprop`, `getprop`, `remprop` |
| `lipskit.syntax`     | `SyntaxType` and `SyntaxTable` |
| `lipskit.strings`    | `concat`, `strcmp`, `strequal`, `stringp`, `strlen`, `substring`, `symstr` |
| `lipskit.logic`      | `p_and`, `p_or`, `p_not`, `xif` |
| `lipskit.low`        | `cond`, `prog1`, `progn`, `set`, `setq`, `setqq`, `xwhile` |
| `lipskit.mapping`    | `map_tails`, `mapc`, `maplist`, `mapcar` |

Some behaviours worth knowing:

- The `c...r` accessors return `None` for anything that is not a cons.
- `nth(x, n)` counts from one and returns the `n`th tail, or `None` if the
  list is too short.
- `length` and `strlen` return a Python `int`; `strcmp` returns -1, 0 or 1,
  comparing the UTF-8 encodings.
- `substring(s, begin, end)` counts from one; negative positions count from
  the end, a `None` end means the rest of the string, and out-of-range
  positions give `None`.
- `eq` is identity, except that integers of equal value are `eq`.
- `xtypeof` returns the type as a symbol (`symbol`, `integer`, `cons`, ...).
  For subrs and lambdas an `evaluates` attribute that is false gives `fsubr`
  or `nlambda`.
- Property lists alternate properties and values; properties are compared
  with identity and `remprop` updates the list in place.

## Syntax table

`SyntaxTable` holds a `SyntaxType` for each of the 256 byte values, plus an
optional read macro function per character. Indexes may be characters or
integers. `reset()` restores the defaults (parentheses, brackets, string
delimiter, escape, separators, digits, signs, comments, quote).
`macro`, `splice` and `infix` install a function and set the matching class;
`read_macro(source, index)` calls that function with `source`, and returns
`None` when no function is installed.

```python
from lipskit.syntax import SyntaxTable, SyntaxType

table = SyntaxTable()
table.get("(")                       # SyntaxType.LEFT_PAREN
table.macro("^", lambda src: src.upper())
table.read_macro("hello", "^")       # 'HELLO'
```

## Evaluation hooks

The special forms in `lipskit.logic` and `lipskit.low` take an `evaluate`
callable, which the host interpreter supplies:

```python
from lipskit.low import progn, setq
from lipskit.types import intern, mklist

def evaluate(expr):
    return expr  # a real interpreter evaluates expr here

progn(mklist(1, 2, 3), evaluate)   # 3
setq(intern("x"), 42, evaluate)    # x is now bound to 42
```

The functions in `lipskit.mapping` take Python callables as `fn1` and `fn2`;
a value that is not callable raises `LispError`. `fn2`, when not `None`, is
called on the current tail in place of `cdr` to reach the next one. In
`maplist` and `mapcar` the step from the first element to the second is
always `cdr`.

```python
from lipskit.mapping import mapcar
from lipskit.types import mklist

mapcar(mklist(1, 2, 3), lambda n: n + 1, None)   # (2 3 4)
```

## What this package does not do

There is no reader that turns text into objects, no evaluator, no printer
beyond the `repr` of cons cells and symbols, and no interactive top level or
command-line program. The package provides the data model and primitives
that such parts are built on.

## Running the tests

```sh
pip install .[test]
pytest
```