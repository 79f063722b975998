"""
Render a finished symbol tree as Scala.js facade source.

The layout follows the tree exactly: members come out in the order the
importer met them. Classes and modules are allowed at the top level of a
package; loose fields, methods and comments are gathered into an object
standing in for the package's own JavaScript namespace.
"""
import re
from typing import TextIO
from boozetools.support.foundation import Visitor
from .ontology import EMPTY, CONSTRUCTOR
from .symbols import (
	Symbol, ContainerSymbol, PackageSymbol, ModuleSymbol, ClassSymbol,
	FieldSymbol, MethodSymbol, ParamSymbol, TypeParamSymbol,
)
from .typeref import TypeRef, QualifiedName, SCALA_JS, SCALA, JAVA_LANG, OBJECT

KEYWORDS = frozenset("""
	abstract case catch class def do else extends false final finally for
	forSome if implicit import lazy macro match new null object override
	package private protected return sealed super this throw trait try true
	type val var while with yield
""".split())

_PLAIN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*$")

def quote_name(nom:str) -> str:
	if nom in KEYWORDS or not _PLAIN.match(nom): return "`%s`" % nom
	return nom

def render_qualified(qname:QualifiedName) -> str:
	parts = qname.parts
	if parts[:len(SCALA_JS.parts)] == SCALA_JS.parts:
		return ".".join(("js",) + tuple(map(quote_name, parts[len(SCALA_JS.parts):])))
	for prefix in SCALA, JAVA_LANG:
		if parts[:len(prefix.parts)] == prefix.parts and len(parts) == len(prefix.parts) + 1:
			return quote_name(parts[-1])
	return ".".join(map(quote_name, parts))

def render_type(tpe:TypeRef) -> str:
	if tpe.is_repeated():
		return render_type(tpe.targs[0]) + "*"
	text = render_qualified(tpe.type_name)
	if tpe.targs:
		text += "[%s]" % ", ".join(map(render_type, tpe.targs))
	return text

def render_tparams(tparams:list[TypeParamSymbol]) -> str:
	if not tparams: return ""
	def one(tp:TypeParamSymbol):
		if tp.upper_bound is None: return quote_name(tp.name)
		return "%s <: %s" % (quote_name(tp.name), render_type(tp.upper_bound))
	return "[%s]" % ", ".join(map(one, tparams))

def render_param(param:ParamSymbol) -> str:
	text = "%s: %s" % (quote_name(param.name), render_type(param.tpe))
	if param.optional: text += " = js.native"
	return text

def render_params(params:list[ParamSymbol]) -> str:
	return ", ".join(map(render_param, params))

def _can_be_top_level(sym:Symbol) -> bool:
	return isinstance(sym, (PackageSymbol, ModuleSymbol, ClassSymbol))

class Printer(Visitor):
	"""
	One printer per output stream. The root package is named after
	`output_package`, which may be dotted.
	"""

	def __init__(self, output:TextIO, output_package:str):
		self.output = output
		self.output_package = output_package
		self._indent = ""
		self._namespace = []

	def print_symbol(self, sym:Symbol):
		self.visit(sym)

	def line(self, text:str=""):
		if text: print(self._indent + text, file=self.output)
		else: print(file=self.output)

	def js_path(self, nom:str) -> str:
		return ".".join(self._namespace + [nom])

	def visit_PackageSymbol(self, sym:PackageSymbol):
		is_root = sym.name == EMPTY
		if is_root:
			*parents, this = self.output_package.split(".")
			if parents: self.line("package " + ".".join(map(quote_name, parents)))
			self.line()
			self.line("import scala.scalajs.js")
			self.line("import js.annotation._")
		else:
			this = sym.name
			self._namespace.append(sym.name)
		if sym.members:
			top_levels = [m for m in sym.members if _can_be_top_level(m)]
			loose = [m for m in sym.members if not _can_be_top_level(m)]
			self.line()
			self.line("package %s {" % quote_name(this))
			for member in top_levels:
				self.visit(member)
			if loose:
				self.line()
				if is_root:
					self.line("@js.native")
					self.line("@JSGlobalScope")
				else:
					self.line("@js.native")
					self.line('@JSGlobal("%s")' % ".".join(self._namespace))
				self.line("object %s extends js.Object {" % quote_name(this[:1].upper() + this[1:]))
				self.members(loose)
				self.line("}")
			self.line()
			self.line("}")
		if not is_root:
			self._namespace.pop()

	def visit_ClassSymbol(self, sym:ClassSymbol):
		parents = sym.parents or [OBJECT]
		self.line()
		self.line("@js.native")
		if sym.is_trait:
			keyword = "trait"
		else:
			keyword = "class"
			self.line('@JSGlobal("%s")' % self.js_path(sym.name))
		header = "%s %s%s extends %s" % (keyword, quote_name(sym.name), render_tparams(sym.tparams), render_type(parents[0]))
		for parent in parents[1:]:
			header += " with " + render_type(parent)
		self.container(header, sym)

	def visit_ModuleSymbol(self, sym:ModuleSymbol):
		self.line()
		self.line("@js.native")
		self.line('@JSGlobal("%s")' % self.js_path(sym.name))
		self.container("object %s extends js.Object" % quote_name(sym.name), sym)

	def container(self, header:str, sym:ContainerSymbol):
		if sym.members:
			self.line(header + " {")
			self.members(sym.members)
			self.line("}")
		else:
			self.line(header)

	def members(self, members):
		outer = self._indent
		self._indent += "  "
		for member in members:
			self.visit(member)
		self._indent = outer

	def visit_CommentSymbol(self, sym):
		self.line("/* %s */" % sym.text.replace("*/", "* /"))

	def visit_FieldSymbol(self, sym:FieldSymbol):
		self.line("var %s: %s = js.native" % (quote_name(sym.name), render_type(sym.tpe)))

	def visit_MethodSymbol(self, sym:MethodSymbol):
		if sym.name == CONSTRUCTOR:
			if sym.params:
				self.line("def this(%s) = this()" % render_params(sym.params))
			return
		prefix = "@JSBracketAccess " if sym.is_bracket_access else ""
		self.line("%sdef %s%s(%s): %s = js.native" % (
			prefix, quote_name(sym.name), render_tparams(sym.tparams),
			render_params(sym.params), render_type(sym.result_type),
		))
