"""
Everything the importer has to say about what it did.

Nearly every oddity in the input degrades to something printable, so the
importer mostly takes notes rather than complaining. There is exactly one
situation it cannot paper over, and that raises Misnested.
"""
import sys
from typing import Any

class Misnested(Exception):
	""" A namespace turned up somewhere other than directly inside a package. """
	def __init__(self, module_name:str, container:Any):
		super().__init__(module_name, container)
		self.module_name, self.container = module_name, container
	def __str__(self):
		return "Found package %s in non-package %r" % (self.module_name, self.container)

class Report:
	notes : list[str]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self.notes = []

	def sick(self): return bool(self.notes)

	def note(self, text:str):
		self.notes.append(text)
		self.info(text)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the notes to the console. """
		if self.notes:
			print("*"*60, file=sys.stderr)
			print("%d declaration(s) could not be imported faithfully:" % len(self.notes), file=sys.stderr)
		for text in self.notes:
			print("  - "+text, file=sys.stderr)
		sys.stderr.flush()

	# Methods the declaration and member passes call:

	def unrecognized(self, owner, node):
		self.note("Left a placeholder in %r for %s" % (owner, type(node).__name__))

	def specialized_signature(self, owner, nom:str):
		self.note("Dropped a signature of %s in %r: a parameter has a constant type." % (nom, owner))

	def duplicate_overload(self, owner, method):
		self.note("Collapsed an overload of %s in %r: it translates the same as an earlier one." % (method.name, owner))

	def duplicate_field(self, owner, nom:str):
		self.note("Ignored a second field %s in %r." % (nom, owner))

	def misnested(self, nom:str, owner):
		self.note("Found package %s in non-package %r" % (nom, owner))
