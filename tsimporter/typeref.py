"""
The type references of the output side.

A TypeRef is a value: a qualified name and some type-arguments.
Two references to the same thing compare (and hash) equal, so they
can be checked against each other for overload collapsing and for
de-duplicating the parents of a class.
"""
from typing import NamedTuple
from .ontology import name, REPEATED

class QualifiedName(NamedTuple):
	parts: tuple[str, ...]

	@staticmethod
	def of(*parts:str) -> "QualifiedName":
		return QualifiedName(tuple(map(name, parts)))

	def dot(self, part:str) -> "QualifiedName":
		return QualifiedName(self.parts + (name(part),))

	def last(self) -> str: return self.parts[-1]
	def __str__(self): return ".".join(self.parts)

ROOT = QualifiedName.of("_root_")
SCALA = ROOT.dot("scala")
SCALA_JS = SCALA.dot("scalajs").dot("js")
JAVA_LANG = ROOT.dot("java").dot("lang")

ARRAY = SCALA_JS.dot("Array")
FUNCTION_BASE = SCALA_JS.dot("Function")

def function_name(arity:int) -> QualifiedName:
	assert arity >= 0
	return SCALA_JS.dot("Function%d" % arity)

class TypeRef(NamedTuple):
	type_name: QualifiedName
	targs: tuple["TypeRef", ...] = ()

	@staticmethod
	def repeated(underlying:"TypeRef") -> "TypeRef":
		return TypeRef(REPEATED_NAME, (underlying,))

	@staticmethod
	def function(params, result:"TypeRef") -> "TypeRef":
		params = tuple(params)
		return TypeRef(function_name(len(params)), params + (result,))

	def is_repeated(self) -> bool: return self.type_name == REPEATED_NAME

	def __str__(self):
		if self.targs: return "%s[%s]" % (self.type_name, ", ".join(map(str, self.targs)))
		else: return str(self.type_name)

REPEATED_NAME = QualifiedName.of(REPEATED)

ANY = TypeRef(SCALA_JS.dot("Any"))
DYNAMIC = TypeRef(SCALA_JS.dot("Dynamic"))
OBJECT = TypeRef(SCALA_JS.dot("Object"))
FUNCTION = TypeRef(FUNCTION_BASE)
UNIT = TypeRef(SCALA.dot("Unit"))
NUMBER = TypeRef(SCALA.dot("Double"))
BOOLEAN = TypeRef(SCALA.dot("Boolean"))
STRING = TypeRef(JAVA_LANG.dot("String"))
