"""
The meat and potatoes: read declaration trees and build the symbol tree.

The work splits into two tree-walks:

DeclarationPass looks at declarations, deciding which container each one
lands in. Several declarations may share a name: a namespace may be opened
many times, and an interface may be declared in several pieces. These merge
into one container. A variable sharing an interface's name becomes the
companion object of that interface's class.

MemberPass looks at the members of one object type or interface body.
It knows both the container being filled and the container that encloses it,
which is where to find a companion class when a variable's type turns out
to describe a constructor.

Neither pass gives up on strange input. What it does not understand becomes
a comment in the output, so a person can finish the job by hand.
The exception is a namespace found inside something other than a package:
that means the caller's traversal is broken, and nothing sensible can follow.
"""
from functools import cached_property
from typing import Iterable, Optional, TextIO
from boozetools.support.foundation import Visitor
from . import trees
from .diagnostics import Report, Misnested
from .ontology import EMPTY, CONSTRUCTOR, APPLY, UPDATE, escape_apply
from .symbols import (
	ContainerSymbol, PackageSymbol, ModuleSymbol,
	MethodSymbol, ParamSymbol, TypeParamSymbol,
)
from .type_translator import TypeTranslator
from .typeref import TypeRef, UNIT

DEFAULT_PACKAGE = "importedjs"

class Importer:
	"""
	Entry point. Builds a root package, feeds it every declaration,
	and hands the finished tree to a printer if there is somewhere to print.
	"""

	def __init__(self, output:Optional[TextIO]=None, *, output_package:str=DEFAULT_PACKAGE, report:Optional[Report]=None, verbose:int=0):
		self.output = output
		self.output_package = output_package
		self.report = Report(verbose=verbose) if report is None else report

	def __call__(self, declarations:Iterable[trees.DeclTree]) -> PackageSymbol:
		root = self.build(declarations)
		if self.output is not None:
			from .printer import Printer
			Printer(self.output, self.output_package).print_symbol(root)
		return root

	def build(self, declarations:Iterable[trees.DeclTree]) -> PackageSymbol:
		root = PackageSymbol(EMPTY)
		walker = DeclarationPass(TypeTranslator(), self.report)
		for declaration in declarations:
			walker.visit(declaration, root)
		self.report.info("Imported", len(root.members), "top-level symbol(s)")
		return root

class _Pass(Visitor):
	""" What both passes have in common: turning signatures into methods. """

	def __init__(self, types:TypeTranslator, report:Report):
		self.types = types
		self.report = report

	def comment(self, owner:ContainerSymbol, node:trees.Tree):
		self.report.unrecognized(owner, node)
		owner.add_comment("??? %r" % (node,))

	def type_params(self, tparams:Iterable[trees.TypeParam]) -> list[TypeParamSymbol]:
		return [
			TypeParamSymbol(tp.name.name, None if tp.upper_bound is None else self.types.translate(tp.upper_bound))
			for tp in tparams
		]

	def define_method(self, owner:ContainerSymbol, nom:str, signature:trees.FunSignature) -> Optional[MethodSymbol]:
		"""
		Returns the method if it was kept. A signature specialized on a constant
		type is discarded outright: the host language has no such types, and the
		general signature will normally be declared alongside it anyway.
		"""
		if any(isinstance(p.tpe, trees.ConstantType) for p in signature.params):
			self.report.specialized_signature(owner, nom)
			return None

		method = MethodSymbol(nom)
		method.tparams.extend(self.type_params(signature.tparams))
		for param in signature.params:
			tpe = param.type_or_any()
			if isinstance(tpe, trees.RepeatedType):
				param_type = TypeRef.repeated(self.types.translate(tpe.underlying))
			else:
				param_type = self.types.translate(tpe)
			method.params.append(ParamSymbol(param.name.name, param_type, param.optional))
		result_type = trees.DYNAMIC if signature.result_type is None else signature.result_type
		method.result_type = self.types.translate(result_type, True)

		if owner.add_method(method): return method
		self.report.duplicate_overload(owner, method)

	def define_field(self, owner:ContainerSymbol, nom:str, tpe:TypeRef):
		if owner.new_field(nom, tpe) is None:
			self.report.duplicate_field(owner, nom)

class DeclarationPass(_Pass):

	def visit_ModuleDecl(self, decl:trees.ModuleDecl, owner:ContainerSymbol):
		nom = decl.name.name
		if not isinstance(owner, PackageSymbol):
			self.report.misnested(nom, owner)
			raise Misnested(nom, owner)
		package = owner.get_package_or_create(nom)
		for inner in decl.members:
			self.visit(inner, package)

	def visit_VarDecl(self, decl:trees.VarDecl, owner:ContainerSymbol):
		nom = decl.name.name
		if isinstance(decl.tpe, trees.ObjectType):
			module = owner.get_module_or_create(nom)
			self.members(owner, module, decl.tpe.members)
		else:
			tpe = trees.ANY if decl.tpe is None else decl.tpe
			self.define_field(owner, nom, self.types.translate(tpe, True))

	def visit_TypeDecl(self, decl:trees.TypeDecl, owner:ContainerSymbol):
		if isinstance(decl.tpe, trees.ObjectType):
			clazz = owner.get_class_or_create(decl.name.name)
			self.members(owner, clazz, decl.tpe.members)
		else:
			self.comment(owner, decl)

	def visit_InterfaceDecl(self, decl:trees.InterfaceDecl, owner:ContainerSymbol):
		clazz = owner.get_class_or_create(decl.name.name)
		clazz.add_parents(self.types.translate_all(decl.inheritance))
		clazz.tparams.extend(self.type_params(decl.tparams))
		self.members(owner, clazz, decl.members)

	def visit_FunctionDecl(self, decl:trees.FunctionDecl, owner:ContainerSymbol):
		self.define_method(owner, decl.name.name, decl.signature)

	def visit_object(self, decl, owner:ContainerSymbol):
		self.comment(owner, decl)

	def members(self, enclosing:ContainerSymbol, owner:ContainerSymbol, members:Iterable[trees.MemberTree]):
		walker = MemberPass(self.types, self.report, enclosing, owner)
		for member in members:
			walker.visit(member)

class MemberPass(_Pass):
	"""
	Fills one container from the members of one body.
	`enclosing` is where `owner` itself lives.
	"""

	def __init__(self, types:TypeTranslator, report:Report, enclosing:ContainerSymbol, owner:ContainerSymbol):
		super().__init__(types, report)
		self.enclosing, self.owner = enclosing, owner

	@cached_property
	def companion_ref(self) -> trees.TypeRef:
		"""
		How the body would refer to the class that shares the owner's name,
		using whatever type parameters that class has by now.
		"""
		clazz = self.enclosing.find_class(self.owner.name)
		targs = () if clazz is None else tuple(trees.TypeRef(trees.TypeName(tp.name)) for tp in clazz.tparams)
		return trees.TypeRef(trees.TypeName(self.owner.name), targs)

	def visit_CallMember(self, member:trees.CallMember):
		self.define_method(self.owner, APPLY, member.signature)

	def visit_ConstructorMember(self, member:trees.ConstructorMember):
		signature = member.signature
		if isinstance(self.owner, ModuleSymbol) and signature.result_type == self.companion_ref:
			clazz = self.enclosing.get_class_or_create(self.owner.name)
			clazz.is_trait = False
			constructor = trees.FunSignature((), signature.params, trees.VOID)
			self.define_method(clazz, CONSTRUCTOR, constructor)
		else:
			self.comment(self.owner, member)

	def visit_PropertyMember(self, member:trees.PropertyMember):
		if member.name.name != "prototype":
			self.define_field(self.owner, escape_apply(member.name.name), self.types.translate(member.tpe))

	def visit_FunctionMember(self, member:trees.FunctionMember):
		self.define_method(self.owner, escape_apply(member.name.name), member.signature)

	def visit_IndexMember(self, member:trees.IndexMember):
		index_name = member.index_name.name
		index_type = self.types.translate(member.index_type)
		value_type = self.types.translate(member.value_type)

		getter = MethodSymbol(APPLY)
		getter.params.append(ParamSymbol(index_name, index_type))
		getter.result_type = value_type
		getter.is_bracket_access = True

		setter = MethodSymbol(UPDATE)
		setter.params.append(ParamSymbol(index_name, index_type))
		setter.params.append(ParamSymbol("v", value_type))
		setter.result_type = UNIT
		setter.is_bracket_access = True

		for accessor in getter, setter:
			if not self.owner.add_method(accessor):
				self.report.duplicate_overload(self.owner, accessor)

	def visit_object(self, member):
		self.comment(self.owner, member)
