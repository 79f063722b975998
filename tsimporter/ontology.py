"""
The most basic vocabulary of the output side: names, and the one class
every symbol in the output tree descends from. These are kept apart from
the rest to avoid circular-import trouble between the type model and the
symbol tree.
"""
import sys

def name(text:str) -> str:
	""" Names are interned strings: equality is exact string equality. """
	assert isinstance(text, str), type(text)
	return sys.intern(text)

EMPTY = name("")
CONSTRUCTOR = name("<init>")
REPEATED = name("*")
APPLY = name("apply")
UPDATE = name("update")

def escape_apply(text:str) -> str:
	# A member really called "apply" would clash with the synthetic call/index accessors.
	return name("$apply") if text == APPLY else name(text)

class Symbol:
	"""
	Anything named that ends up in the output tree.
	Fields, methods, classes, packages, that sort of thing.
	"""
	name: str

	def __init__(self, nom:str): self.name = name(nom)
	def __repr__(self): return "{%s:%s}" % (self.name, type(self).__name__)
