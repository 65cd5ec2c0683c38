# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Array utilities in the style of lodash.
Every function returns a fresh list and leaves its input untouched.
Absence is reported with `None` (or -1 for the index finders) rather than by raising.
'''

from decimal import Decimal
from inspect import Parameter, signature
from math import ceil
from numbers import Number
from typing import Any, Callable, Sequence, TypeVar


__all__ = [
  'chunk',
  'compact',
  'drop',
  'drop_right',
  'drop_right_while',
  'drop_while',
  'fill',
  'find_index',
  'find_last_index',
  'head',
  'initial',
  'is_falsey',
  'last',
  'negate',
  'nth',
  'zip3',
]


_T = TypeVar('_T')
_U = TypeVar('_U')
_V = TypeVar('_V')

Predicate = Callable[..., Any]
#^ Called as `(value, index, seq)`, or with fewer leading arguments if that is all it accepts.


def negate(predicate:Predicate) -> Predicate:
  '''
  Return a predicate that inverts the boolean result of `predicate`.
  Arguments beyond those that `predicate` accepts are dropped.
  '''
  arity = _predicate_arity(predicate)
  def negated(*args:Any) -> bool:
    return not predicate(*args[:arity])
  return negated


def _predicate_arity(predicate:Predicate) -> int:
  '''
  Return the number of leading `(value, index, seq)` arguments to pass to `predicate`.
  This is the number of required positional parameters, but at least one if any positional parameter exists,
  so that parameters with defaults (e.g. `lambda v, limit=3: ...`) are left alone.
  Callables without an inspectable signature (some builtins) are given the value only.
  Raises `ValueError` if `predicate` has a required keyword-only parameter, since it could never be called.
  '''
  try: sig = signature(predicate)
  except (TypeError, ValueError): return 1
  positional = 0
  required = 0
  for par in sig.parameters.values():
    if par.kind == Parameter.VAR_POSITIONAL: return 3
    if par.kind == Parameter.KEYWORD_ONLY and par.default is Parameter.empty:
      raise ValueError(f'predicate has a required keyword-only parameter `{par.name}`; received: {predicate!r}')
    if par.kind in (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD):
      positional += 1
      if par.default is Parameter.empty: required += 1
  if required == 0: return min(positional, 1)
  return min(required, 3)


def _bind_predicate(predicate:Predicate, seq:Sequence[_T]) -> Callable[[int], bool]:
  'Return a function of an index that applies `predicate` to the element at that index.'
  arity = _predicate_arity(predicate)
  if arity == 0: return lambda i: bool(predicate())
  if arity == 1: return lambda i: bool(predicate(seq[i]))
  if arity == 2: return lambda i: bool(predicate(seq[i], i))
  return lambda i: bool(predicate(seq[i], i, seq))


def chunk(seq:Sequence[_T], size:int=1) -> list[list[_T]]:
  '''
  Split `seq` into lists of `size` consecutive elements.
  If `seq` cannot be split evenly, the final chunk holds the remaining elements.
  '''
  if size <= 0: raise ValueError(f'chunk size must be positive; received: {size!r}')
  return [list(seq[i*size:(i+1)*size]) for i in range(ceil(len(seq) / size))]


def is_falsey(el:Any) -> bool:
  '''
  The falsey test used by `compact`: `None`, `False`, numeric zero, NaN, and the empty string.
  Unlike Python truthiness, empty containers are not falsey.
  '''
  if el is None: return True
  if isinstance(el, str): return el == ''
  if isinstance(el, Decimal): return el.is_zero() or el.is_nan() # comparing a signaling NaN raises.
  if isinstance(el, Number): return el == 0 or el != el # `bool` is a `Number`; NaN is unequal to itself.
  return False


def compact(seq:Sequence[_T]) -> list[_T]:
  'Return the elements of `seq` that are not falsey; see `is_falsey`.'
  return [el for el in seq if not is_falsey(el)]


def head(seq:Sequence[_T]) -> _T|None:
  'Return the first element of `seq`, or None if it is empty.'
  return seq[0] if seq else None


def last(seq:Sequence[_T]) -> _T|None:
  'Return the last element of `seq`, or None if it is empty.'
  return seq[-1] if seq else None


def initial(seq:Sequence[_T]) -> list[_T]:
  '''
  Return all but the last element of `seq`.
  Note: a sequence of length zero or one is returned whole (as a copy), not emptied.
  '''
  return list(seq[:max(len(seq) - 1, 1)])


def drop(seq:Sequence[_T], count:int=1) -> list[_T]:
  'Return `seq` with `count` elements removed from the beginning.'
  if count < 0: raise ValueError(f'drop count must not be negative; received: {count!r}')
  return list(seq[count:])


def drop_right(seq:Sequence[_T], count:int=1) -> list[_T]:
  'Return `seq` with `count` elements removed from the end.'
  if count < 0: raise ValueError(f'drop_right count must not be negative; received: {count!r}')
  return list(seq[:max(len(seq) - count, 0)])


def drop_while(seq:Sequence[_T], predicate:Predicate) -> list[_T]:
  'Remove elements from the beginning of `seq` until `predicate` returns false.'
  start = find_index(seq, negate(predicate))
  if start == -1: return []
  return list(seq[start:])


def drop_right_while(seq:Sequence[_T], predicate:Predicate) -> list[_T]:
  'Remove elements from the end of `seq` until `predicate` returns false.'
  end = find_last_index(seq, negate(predicate))
  return list(seq[:end+1]) # -1 (every element matched) yields the empty slice.


def fill(seq:Sequence[_T], value:_U, start:int=0, end:int|None=None) -> list[_T|_U]:
  '''
  Return a copy of `seq` with the elements from `start` up to (but not including) `end` replaced by `value`.
  The input is not mutated.
  `end` defaults to the length of `seq`.
  Bounds follow slice semantics: negative indices count from the end and out-of-range indices are clamped.
  '''
  result:list[_T|_U] = list(seq)
  span = range(len(result))[start:end]
  result[start:end] = [value] * len(span)
  return result


def find_index(seq:Sequence[_T], predicate:Predicate, start_index:int=0) -> int:
  '''
  Return the lowest index at or after `start_index` for which `predicate` holds, or -1.
  An out-of-range `start_index` yields -1.
  '''
  if start_index < 0: return -1
  test = _bind_predicate(predicate, seq)
  for i in range(start_index, len(seq)):
    if test(i): return i
  return -1


def find_last_index(seq:Sequence[_T], predicate:Predicate, start_index:int|None=None) -> int:
  '''
  Return the highest index at or before `start_index` for which `predicate` holds, scanning backwards, or -1.
  `start_index` defaults to the last index; an out-of-range `start_index` yields -1.
  '''
  if start_index is None: start_index = len(seq) - 1
  elif start_index >= len(seq): return -1
  test = _bind_predicate(predicate, seq)
  for i in range(start_index, -1, -1):
    if test(i): return i
  return -1


def nth(seq:Sequence[_T], n:int=0) -> _T|None:
  '''
  Return the element of `seq` at index `n`; negative indices count from the end.
  Out-of-range indices return None.
  '''
  l = len(seq)
  if not -l <= n < l: return None
  return seq[n]


def zip3(seq_a:Sequence[_T], seq_b:Sequence[_U], seq_c:Sequence[_V]) -> list[tuple[_T, _U|None, _V|None]]:
  '''
  Return a list of triples pairing the elements of the three sequences by index.
  The result has the length of `seq_a`; positions past the end of `seq_b` or `seq_c` are filled with None.
  '''
  lb = len(seq_b)
  lc = len(seq_c)
  return [(a, (seq_b[i] if i < lb else None), (seq_c[i] if i < lc else None)) for i, a in enumerate(seq_a)]
