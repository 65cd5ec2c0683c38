# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, overload

from typing_extensions import Any, override


__all__ = ['Stack', 'StackFrame']


class Stack[_El](Sequence[_El]):
  '''
  A LIFO stack of elements.
  This is implemented as a list, which stores the elements in reverse order (the top is the last list element).
  Indexing and iteration are top-first.
  The stack can only be changed through `push` and `pop`; `size` is derived from the backing list and is read-only.
  Popping or peeking an empty stack returns None rather than raising.
  The stack is not thread-safe.
  '''
  _list:list[_El]


  def __init__(self, iterable:Iterable[_El]=()):
    'Push the elements of `iterable` in order, so that its last element is the top.'
    self._list = list(iterable)


  @property
  def size(self) -> int:
    return len(self._list)


  @override
  def __len__(self) -> int:
    return len(self._list)


  def __repr__(self) -> str:
    return f'Stack({self.to_list()})'


  def __eq__(self, other:Any) -> bool:
    return isinstance(other, Stack) and self._list == other._list


  @overload
  def __getitem__(self, index:int, /) -> _El: ...

  @overload
  def __getitem__(self, index:slice, /) -> Sequence[_El]: ...

  @override
  def __getitem__(self, index:int|slice) -> _El|Sequence[_El]:
    if isinstance(index, slice): return self.to_list()[index]
    l = len(self._list)
    if index < 0: index += l
    if not 0 <= index < l: raise IndexError(index)
    return self._list[l - index - 1]


  @override
  def __iter__(self) -> Iterator[_El]:
    return reversed(self._list)


  def push(self, value:_El, /) -> None:
    self._list.append(value)


  def pop(self) -> _El|None:
    'Remove and return the top element, or return None if the stack is empty.'
    if not self._list: return None
    return self._list.pop()


  def peek(self) -> _El|None:
    'Return the top element without removing it, or None if the stack is empty.'
    return self._list[-1] if self._list else None


  def to_list(self) -> list[_El]:
    'Return a new list of the elements, top first.'
    return self._list[::-1]



@dataclass(frozen=True, eq=False, repr=False)
class StackFrame[_El]:
  '''
  An immutable, singly linked stack frame.
  `next` is the frame below this one; None marks the last frame.
  Pushing onto a frame creates a new frame and shares the existing ones, so older frames remain valid stacks.
  Equality, hashing and repr walk the chain iteratively, so chains of any depth are supported.
  '''
  value:_El
  next:Optional['StackFrame[_El]'] = None


  @staticmethod
  def push[_E](frame:'StackFrame[_E]|None', value:_E) -> 'StackFrame[_E]':
    'Return a new frame holding `value` on top of `frame`, which may be None for an empty stack.'
    return StackFrame(value, frame)


  def __iter__(self) -> Iterator[_El]:
    frame:StackFrame[_El]|None = self
    while frame is not None:
      yield frame.value
      frame = frame.next


  def __len__(self) -> int:
    return sum(1 for _ in self)


  def __repr__(self) -> str:
    return f'StackFrame({self.to_list()})'


  def __eq__(self, other:Any) -> bool:
    if not isinstance(other, StackFrame): return NotImplemented
    a:StackFrame|None = self
    b:StackFrame|None = other
    while a is not None and b is not None:
      if a is b: return True # Shared frames below this point.
      if a.value != b.value: return False
      a = a.next
      b = b.next
    return a is None and b is None


  def __hash__(self) -> int:
    return hash(tuple(self))


  def to_list(self) -> list[_El]:
    'Return a new list of the values, top first.'
    return list(self)
