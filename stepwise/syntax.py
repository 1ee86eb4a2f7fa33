"""
The four forms a program can take.

Nodes are built once and never modified afterward, so the same node
(and the same subtree) may be shared by any number of closures and
evaluated as often as anyone likes. Equality is structural, which is
mostly a convenience for tests.
"""
from typing import Any

class Expr:
	__slots__ = ()
	def _key(self) -> tuple: raise NotImplementedError(type(self))
	def __eq__(self, other): return type(self) is type(other) and self._key() == other._key()
	def __hash__(self): return hash((type(self), self._key()))
	def __setattr__(self, key, value): raise AttributeError("%s is immutable" % type(self).__name__)
	def __repr__(self): return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, self._key())))
	
	def _init(self, **fields):
		for k, v in fields.items(): object.__setattr__(self, k, v)

class Put(Expr):
	""" An embedded literal value """
	__slots__ = ('value',)
	value: Any
	def __init__(self, value): self._init(value=value)
	def _key(self): return (self.value,)

class Name(Expr):
	""" A reference to whatever the environment says this identifier means. """
	__slots__ = ('id',)
	id: str
	def __init__(self, id:str):
		assert isinstance(id, str), id
		self._init(id=id)
	def _key(self): return (self.id,)

class Call(Expr):
	""" Application: function first, then argument. """
	__slots__ = ('func', 'arg')
	func: Expr
	arg: Expr
	def __init__(self, func:Expr, arg:Expr):
		assert isinstance(func, Expr), func
		assert isinstance(arg, Expr), arg
		self._init(func=func, arg=arg)
	def _key(self): return self.func, self.arg

class Lam(Expr):
	""" Abstraction over one parameter. """
	__slots__ = ('argname', 'body')
	argname: str
	body: Expr
	def __init__(self, argname:str, body:Expr):
		assert isinstance(argname, str), argname
		assert isinstance(body, Expr), body
		self._init(argname=argname, body=body)
	def _key(self): return self.argname, self.body
