"""
Step-by-step evaluation strategy.

This exists for when you want to execute a program in small steps:
to limit for how long it runs, or how fast, or to interleave it with
other work. Each call to `Stepper.step` does one bounded unit of work,
either elaborating one pending expression or delivering one finished
value to the continuation waiting for it, and then returns.

Instead of Python stack frames, pending work lives in two places:

* The blackboard maps a marker (a small integer, unique to this stepper)
  to an `Entry`: an expression still to elaborate, the environment to do
  it in, a one-shot callback for the eventual value, and the marker of
  the entry which wants the callback's result.

* The work list is a stack of `Elaborate` and `Deliver` items. Being LIFO,
  it runs a call's function before its argument, and both before the body,
  which is the same order the direct evaluator observes.

For example:

	stepper = Stepper(app(lam("x", "y", ref("y")), 420, 69), Environment.fresh())
	while True:
		outcome = stepper.step()
		if outcome is not None: break

produces `Outcome(value=69)` on the eleventh step.
"""
from typing import NamedTuple, Optional, Union
from . import syntax
from .diagnostics import EvalError
from .environment import Environment
from .elaboration import Done, NeedElaboration, THUNK, CALLBACK, elaborate
from .values import VALUE

MARKER = int

class Entry:
	__slots__ = ('need', 'env', 'callback', 'parent')
	def __init__(self, need:syntax.Expr, env:Environment, callback:CALLBACK, parent:Optional[MARKER]):
		self.need = need
		self.env = env
		self.callback = callback
		self.parent = parent
	def __repr__(self): return "<Entry %r parent=%r>" % (self.need, self.parent)

class Elaborate(NamedTuple):
	marker: MARKER

class Deliver(NamedTuple):
	marker: Optional[MARKER]
	value: VALUE

STEP = Union[Elaborate, Deliver]

class Outcome(NamedTuple):
	""" How an evaluation ended: with a value, or with an error. Never both. """
	value: VALUE = None
	error: Optional[EvalError] = None
	
	def ok(self) -> bool: return self.error is None
	
	def unwrap(self) -> VALUE:
		if self.error is not None: raise self.error
		return self.value

class EvaluatorSpent(RuntimeError):
	""" Someone called `step` again after the final outcome was already given. """

def _identity(value:VALUE) -> THUNK: return Done(value)

class Stepper:
	ROOT = 0
	
	def __init__(self, expr:syntax.Expr, env:Environment):
		self._last_marker = self.ROOT
		self._blackboard = {self.ROOT: Entry(expr, env, _identity, None)}
		self._work: list[STEP] = [Elaborate(self.ROOT)]
	
	@property
	def done(self) -> bool: return not self._work
	
	def peek(self) -> Optional[STEP]:
		""" What the next call to `step` will do, for the benefit of tracers. """
		return self._work[-1] if self._work else None
	
	def pending(self) -> int:
		""" How many continuations are waiting for a value. """
		return len(self._blackboard)
	
	def step(self) -> Optional[Outcome]:
		"""
		Do one unit of work. Returns None if there is more to do,
		or else the final Outcome. Thereafter, calling again is an error.
		"""
		if not self._work: raise EvaluatorSpent("I'm already done!")
		item = self._work.pop()
		try:
			if isinstance(item, Deliver): return self._deliver(item)
			else: return self._elaborate(item)
		except EvalError as ex:
			self._work.clear()
			self._blackboard.clear()
			return Outcome(error=ex)
	
	def _deliver(self, item:Deliver) -> Optional[Outcome]:
		if item.marker is None:
			assert not self._blackboard, self._blackboard
			return Outcome(value=item.value)
		# Removal comes first: each callback gets exactly one shot.
		entry = self._blackboard.pop(item.marker)
		self._follow(entry.callback(item.value), entry.parent)
	
	def _elaborate(self, item:Elaborate) -> None:
		# The entry stays put until its own value gets delivered.
		entry = self._blackboard[item.marker]
		self._follow(elaborate(entry.need, entry.env), item.marker)
	
	def _follow(self, thunk:THUNK, parent:Optional[MARKER]):
		if isinstance(thunk, Done): self._work.append(Deliver(parent, thunk.value))
		else: self._spawn(thunk, parent)
	
	def _spawn(self, need:NeedElaboration, parent:Optional[MARKER]):
		self._last_marker += 1
		marker = self._last_marker
		self._blackboard[marker] = Entry(need.expr, need.env, need.callback, parent)
		self._work.append(Elaborate(marker))
