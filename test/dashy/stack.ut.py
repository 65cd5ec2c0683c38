# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import FrozenInstanceError
from operator import contains, getitem

from dashy.stack import Stack, StackFrame
from utest import utest, utest_call, utest_exc, utest_seq, utest_val


@utest_call
def test_push_pop() -> None:
  s = Stack[int]()
  utest_val(0, s.size)
  s.push(1)
  s.push(2)
  s.push(3)
  utest_val(3, s.size)
  utest(3, s.pop)
  utest_val(2, s.size)
  utest(2, s.pop)
  utest(1, s.pop)
  utest(None, s.pop)
  utest_val(0, s.size)
  utest(None, s.pop)
  utest_val(0, s.size)


@utest_call
def test_peek() -> None:
  s = Stack[str]()
  utest(None, s.peek)
  s.push('a')
  s.push('b')
  utest('b', s.peek)
  utest('b', s.peek)
  utest_val(2, s.size)


@utest_call
def test_to_list() -> None:
  s = Stack[int]()
  s.push(1)
  s.push(2)
  utest([2, 1], s.to_list)
  utest_val(2, s.size)
  l = s.to_list()
  l.append(9)
  utest([2, 1], s.to_list)
  utest([], Stack().to_list)


@utest_call
def test_size_is_read_only() -> None:
  s = Stack([1])
  utest_exc(AttributeError, setattr, s, 'size', 5)
  utest_val(1, s.size)


@utest_call
def test_sequence_protocol() -> None:
  s = Stack([1, 2, 3])
  utest(3, s.peek)
  utest(3, len, s)
  utest_seq([3, 2, 1], iter, s)
  utest(3, getitem, s, 0)
  utest(1, getitem, s, -1)
  utest_exc(IndexError(3), getitem, s, 3)
  utest([3], getitem, s, slice(0, 1))
  utest([1, 2, 3], getitem, s, slice(None, None, -1))
  utest([], getitem, s, slice(5, 9))
  utest(True, contains, s, 2)
  utest(True, bool, Stack([0]))
  utest(False, bool, Stack())
  utest('Stack([3, 2, 1])', repr, s)
  utest_val(Stack([1, 2]), Stack([1, 2]))
  utest_val(False, Stack([1]) == [1])


@utest_call
def test_stack_frames() -> None:
  bottom = StackFrame.push(None, 1)
  a = StackFrame.push(bottom, 2)
  b = StackFrame.push(bottom, 3)
  utest([1], bottom.to_list)
  utest([2, 1], a.to_list)
  utest([3, 1], b.to_list)
  utest_val(bottom, a.next)
  utest_val(None, bottom.next)
  utest(2, len, a)
  utest_seq([2, 1], iter, a)
  utest_exc(FrozenInstanceError, setattr, a, 'value', 5)
  utest_val(StackFrame.push(bottom, 2), a)
  utest_val(False, a == b)
  utest_val(False, a == bottom)
  utest('StackFrame([2, 1])', repr, a)
  utest(hash((2, 1)), hash, a)


@utest_call
def test_deep_stack_frames() -> None:
  depth = 5000
  f:StackFrame[int]|None = None
  g:StackFrame[int]|None = None
  for i in range(depth):
    f = StackFrame.push(f, i)
    g = StackFrame.push(g, i)
  assert f is not None and g is not None
  utest(depth, len, f)
  utest_val(True, f == g)
  utest_val(False, f == StackFrame.push(g, -1))
  utest(hash(g), hash, f)
  utest(f'StackFrame({list(range(depth - 1, -1, -1))})', repr, f)
