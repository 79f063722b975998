"""
From declaration-language types to host-language type references.

This is a pure function of the type tree and a mode flag. The mode only
matters for a bare `any`: in outer mode (the declared type of a variable,
or the result of a declared function) it becomes js.Dynamic so that the
generated facade stays usable; everywhere else it becomes js.Any.

Nothing here ever fails. A shape with no good translation becomes js.Any,
or the bare js.Function for function types that cannot be spelled out.
"""
from boozetools.support.foundation import Visitor
from . import trees
from .typeref import (
	QualifiedName, TypeRef, ARRAY, FUNCTION_BASE,
	ANY, DYNAMIC, UNIT, NUMBER, BOOLEAN, STRING, FUNCTION,
)

CORE_TYPES = {
	"number": NUMBER,
	"bool": BOOLEAN,
	"boolean": BOOLEAN,
	"string": STRING,
	"void": UNIT,
	"dynamic": DYNAMIC,
}

BUILT_IN_BASES = {
	"Array": ARRAY,
	"Function": FUNCTION_BASE,
}

def core_type(text:str, any_as_dynamic:bool=False) -> TypeRef:
	if text == "any": return DYNAMIC if any_as_dynamic else ANY
	return CORE_TYPES.get(text, ANY)

class TypeTranslator(Visitor):

	def translate(self, tpe:trees.TypeTree, any_as_dynamic:bool=False) -> TypeRef:
		return self.visit(tpe, any_as_dynamic)

	def translate_all(self, tpes) -> tuple[TypeRef, ...]:
		return tuple(self.translate(t) for t in tpes)

	def visit_TypeRef(self, tpe:trees.TypeRef, any_as_dynamic:bool) -> TypeRef:
		if isinstance(tpe.base, trees.CoreType):
			if tpe.targs: return ANY
			return core_type(tpe.base.name, any_as_dynamic)
		return TypeRef(self.base_name(tpe.base), self.translate_all(tpe.targs))

	@staticmethod
	def base_name(base:trees.BaseTypeName) -> QualifiedName:
		if isinstance(base, trees.QualifiedTypeName):
			return QualifiedName.of(*(ident.name for ident in base.qualifier), base.name.name)
		if base.name in BUILT_IN_BASES:
			return BUILT_IN_BASES[base.name]
		return QualifiedName.of(base.name)

	@staticmethod
	def visit_ObjectType(tpe:trees.ObjectType, any_as_dynamic:bool) -> TypeRef:
		# Structural object types have no nominal counterpart.
		return ANY

	def visit_FunctionType(self, tpe:trees.FunctionType, any_as_dynamic:bool) -> TypeRef:
		signature = tpe.signature
		if signature.result_type is None:
			return ANY
		if signature.tparams:
			# Polymorphic function values have no FunctionN.
			return FUNCTION
		if any(isinstance(p.tpe, trees.RepeatedType) for p in signature.params):
			return FUNCTION
		param_types = self.translate_all(p.type_or_any() for p in signature.params)
		if signature.result_type == trees.ANY:
			result_type = ANY
		else:
			result_type = self.translate(signature.result_type)
		return TypeRef.function(param_types, result_type)

	def visit_RepeatedType(self, tpe:trees.RepeatedType, any_as_dynamic:bool) -> TypeRef:
		return TypeRef.repeated(self.translate(tpe.underlying))

	@staticmethod
	def visit_object(tpe, any_as_dynamic:bool) -> TypeRef:
		# Unions, tuples, type queries, constant types, and whatever else comes along.
		return ANY
