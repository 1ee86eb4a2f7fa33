"""
This module defines the run-time value-types the evaluators operate in terms of.
Basic primitive values play themselves: integers are Python ints, strings are str,
and vectors are tuples of values. Functions need more help.

Nothing here is ever modified after construction.
"""
from typing import Any, Callable, Union
from .syntax import Expr
from .environment import Environment

class Function:
	""" A run-time object that can be applied to one argument. """
	__slots__ = ()

class Builtin(Function):
	"""
	An opaque native capability, known by a name for diagnostic purposes.
	
	What the wrapped callable returns depends on the strategy that will
	call it: the direct evaluator expects a finished value, whereas the
	stepped evaluator expects a thunk. Each evaluation module therefore
	provides its own `primitive` to wrap plain value-returning functions.
	"""
	__slots__ = ('name', 'fn')
	def __init__(self, name:str, fn:Callable[[Any], Any]):
		self.name = name
		self.fn = fn
	def __repr__(self): return "<BuiltinFn %s>" % self.name

class Closure(Function):
	""" The run-time manifestation of a lambda: its parameter, its body, and its natal environment. """
	__slots__ = ('argname', 'body', 'env')
	def __init__(self, argname:str, body:Expr, env:Environment):
		self.argname = argname
		self.body = body
		self.env = env
	def __repr__(self): return "<UserFn %s>" % self.argname

VALUE = Union[int, str, tuple, Builtin, Closure]

_KIND = {int: "integer", str: "string", tuple: "vec", Builtin: "built-in function", Closure: "user function"}

def describe(value:VALUE) -> str:
	""" Name the variant of a value, for use in error messages. """
	for cls in type(value).__mro__:
		if cls in _KIND: return _KIND[cls]
	raise TypeError("Not a value: %r" % (value,))

def show(value:VALUE) -> str:
	if isinstance(value, tuple): return "[%s]" % ", ".join(map(show, value))
	if isinstance(value, str): return repr(value)
	return str(value) if isinstance(value, int) else repr(value)
