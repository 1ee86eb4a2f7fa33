"""
The built-in library: a root scope of useful bindings, in two flavors.

The same plain Python functions serve both strategies. Each strategy's
`primitive` wraps them in whatever kind of built-in that strategy calls.
Only `twice` differs in substance: the stepped version asks for more
elaboration rather than calling back into an evaluator, which goes to
show that a built-in can be written in terms of further evaluation.

Booleans are the usual two-argument selectors: `tru a b` is `a`,
and `lie a b` is `b`. They are ordinary closures, so they work
the same way under either strategy.
"""
import sys
import operator
from typing import Callable
from . import direct_evaluator, elaboration
from .diagnostics import TypeMismatch
from .environment import Environment, InnerEnv
from .syntax import Put, Name, Call, Lam
from .values import Builtin, Closure, VALUE, describe, show

PRIMITIVE = Callable[[str, Callable], Builtin]

_NIL_CLOSURE = Environment.fresh()

TRU = Closure("x", Lam("__y", Name("x")), _NIL_CLOSURE)
LIE = Closure("__x", Lam("y", Name("y")), _NIL_CLOSURE)

def _integer(who:str, x:VALUE) -> int:
	# bool would sneak past isinstance, but there are no bools in this language.
	if type(x) is not int: raise TypeMismatch("%s wants integers, not %s" % (who, describe(x)))
	return x

def _arithmetic(op):
	who = op.__name__
	return lambda a, b: op(_integer(who, a), _integer(who, b))

def _eq(a:VALUE, b:VALUE) -> Closure:
	return TRU if type(a) is type(b) and a == b else LIE

def _concat(a:VALUE, b:VALUE) -> str:
	if not (isinstance(a, str) and isinstance(b, str)):
		raise TypeMismatch("concat wants strings, not %s and %s" % (describe(a), describe(b)))
	return a + b

def _length(x:VALUE) -> int:
	if not isinstance(x, (str, tuple)):
		raise TypeMismatch("length wants a string or vec, not %s" % describe(x))
	return len(x)

_CURRIED = {
	"add": _arithmetic(operator.add),
	"sub": _arithmetic(operator.sub),
	"mul": _arithmetic(operator.mul),
	"eq": _eq,
	"concat": _concat,
	"pair": lambda a, b: (a, b),
}

def _curry(primitive:PRIMITIVE, name:str, fn:Callable[[VALUE, VALUE], VALUE]) -> Builtin:
	return primitive(name, lambda a: primitive(name + " _", lambda b: fn(a, b)))

def _printer(out):
	def _show(x:VALUE) -> VALUE:
		print(show(x), file=out or sys.stdout)
		return x
	return _show

def _library(primitive:PRIMITIVE, out) -> list[tuple[str, VALUE]]:
	lib = [("tru", TRU), ("lie", LIE)]
	lib.extend((name, _curry(primitive, name, fn)) for name, fn in _CURRIED.items())
	lib.append(("length", primitive("length", _length)))
	lib.append(("show", primitive("show", _printer(out))))
	return lib

###############################################################################

def _direct_twice(f:VALUE) -> Builtin:
	def twice(x:VALUE) -> VALUE:
		return direct_evaluator.apply(f, direct_evaluator.apply(f, x))
	return Builtin("twice _", twice)

def _stepped_twice(f:VALUE) -> elaboration.THUNK:
	def again(y:VALUE) -> elaboration.THUNK:
		return elaboration.NeedElaboration(Call(Put(f), Put(y)), _NIL_CLOSURE, elaboration.Done)
	def twice(x:VALUE) -> elaboration.THUNK:
		return elaboration.NeedElaboration(Call(Put(f), Put(x)), _NIL_CLOSURE, again)
	return elaboration.Done(Builtin("twice _", twice))

def direct_scope(out=None) -> InnerEnv:
	""" Root scope for the direct evaluator. `show` writes to `out`, or else to stdout. """
	lib = _library(direct_evaluator.primitive, out)
	lib.append(("twice", Builtin("twice", _direct_twice)))
	return Environment.fresh().bind_many(lib)

def stepped_scope(out=None) -> InnerEnv:
	""" Root scope for the stepped evaluator. `show` writes to `out`, or else to stdout. """
	lib = _library(elaboration.primitive, out)
	lib.append(("twice", Builtin("twice", _stepped_twice)))
	return Environment.fresh().bind_many(lib)
