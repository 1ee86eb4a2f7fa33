"""
Things that go wrong, and the means to talk about them.

Evaluation errors are ordinary exceptions. Nothing in the evaluators
recovers from one locally: the first error ends the whole evaluation.
The stepped evaluator catches it at the boundary of a single step and
hands it back as the final outcome; the direct evaluator simply lets
it propagate to whoever called.
"""
import sys

class EvalError(Exception):
	""" Root of the things a running program can do wrong. """

class UndefinedName(EvalError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name

class TypeMismatch(EvalError):
	def __init__(self, reason:str):
		super().__init__(reason)
		self.reason = reason

class Misc(EvalError):
	""" Catch-all, mainly for conditions the driver imposes, like running out of steps. """
	def __init__(self, message:str):
		super().__init__(message)
		self.message = message


class Report:
	"""
	Verbose chatter goes to stderr, and only when asked for.
	Level 1 says what the driver is doing; level 2 traces every step.
	"""
	def __init__(self, *, verbose:int=0, stream=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._stream = stream
	
	def _emit(self, *args):
		print(*args, file=self._stream or sys.stderr)
	
	def info(self, *args):
		if self._verbose:
			self._emit(*args)
	
	def trace_step(self, nr:int, item):
		if self._verbose > 1:
			self._emit("%6d: %r" % (nr, item))

QUIET = Report()
