"""
Elaboration: evaluation one level deep, and never deeper.

Given one expression and one environment, `elaborate` does exactly the
work that needs no sub-expression evaluated, and then either hands back
a finished value or says which sub-expression it needs next, along with
what to do once that value is known. Finishing the job is somebody
else's problem (see `stepper`), which is the whole point: no Python
stack frame here ever waits on another elaboration.

Errors are raised as `EvalError` exceptions. They cross exactly one
step before the stepper catches them.
"""
from typing import Any, Callable, NamedTuple, Union
from boozetools.support.foundation import Visitor
from . import syntax
from .diagnostics import TypeMismatch
from .environment import Environment
from .values import Builtin, Closure, VALUE, describe

class Done(NamedTuple):
	value: VALUE

class NeedElaboration(NamedTuple):
	expr: syntax.Expr
	env: Environment
	callback: "CALLBACK"

THUNK = Union[Done, NeedElaboration]
CALLBACK = Callable[[VALUE], THUNK]

def primitive(name:str, fn:Callable[[Any], VALUE]) -> Builtin:
	""" Wrap a plain function as a built-in that finishes in one go. """
	return Builtin(name, lambda arg: Done(fn(arg)))

class Elaborator(Visitor):
	
	@staticmethod
	def visit_Put(expr:syntax.Put, env:Environment) -> THUNK:
		return Done(expr.value)
	
	@staticmethod
	def visit_Name(expr:syntax.Name, env:Environment) -> THUNK:
		return Done(env.lookup(expr.id))
	
	@staticmethod
	def visit_Lam(expr:syntax.Lam, env:Environment) -> THUNK:
		return Done(Closure(expr.argname, expr.body, env.child()))
	
	def visit_Call(self, expr:syntax.Call, env:Environment) -> THUNK:
		def with_function(fn:VALUE) -> THUNK:
			return NeedElaboration(expr.arg, env, lambda arg: self.apply(fn, arg))
		return NeedElaboration(expr.func, env, with_function)
	
	def apply(self, fn:VALUE, arg:VALUE) -> THUNK:
		if isinstance(fn, Builtin):
			thunk = fn.fn(arg)
			assert isinstance(thunk, (Done, NeedElaboration)), (fn, thunk)
			return thunk
		if isinstance(fn, Closure):
			# Tail position: elaborate the body, but do not finish it here.
			return self.visit(fn.body, fn.env.child().bind(fn.argname, arg))
		raise TypeMismatch("Cannot call %s" % describe(fn))

_ELABORATOR = Elaborator()

def elaborate(expr:syntax.Expr, env:Environment) -> THUNK:
	return _ELABORATOR.visit(expr, env)

def apply(fn:VALUE, arg:VALUE) -> THUNK:
	return _ELABORATOR.apply(fn, arg)
