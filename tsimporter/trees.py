"""
The declaration trees, in simple form.

Whatever parses a `.d.ts` file is expected to build these.
They come in four layers: names, types, members (the bodies of object types
and interfaces), and declarations. Every node is an immutable dataclass,
so two trees compare equal exactly when they have the same shape. The
importer relies on that to recognize a constructor signature by its
declared result type.

Sequences are tuples. Optional things are None when absent.
"""
from dataclasses import dataclass
from typing import Any, Optional, Union

@dataclass(frozen=True)
class Tree:
	pass

##################################################################
# Names

@dataclass(frozen=True)
class Ident(Tree):
	name: str

@dataclass(frozen=True)
class PropertyName(Tree):
	name: str

@dataclass(frozen=True)
class TypeName(Tree):
	name: str

@dataclass(frozen=True)
class CoreType(TypeName):
	""" number, string, boolean, void, any, dynamic, and friends """

@dataclass(frozen=True)
class QualifiedTypeName(Tree):
	qualifier: tuple[Ident, ...]
	name: TypeName

BaseTypeName = Union[TypeName, QualifiedTypeName]

##################################################################
# Types

@dataclass(frozen=True)
class TypeTree(Tree):
	pass

@dataclass(frozen=True)
class TypeRef(TypeTree):
	base: BaseTypeName
	targs: tuple[TypeTree, ...] = ()

@dataclass(frozen=True)
class ObjectType(TypeTree):
	members: tuple["MemberTree", ...]

@dataclass(frozen=True)
class FunctionType(TypeTree):
	signature: "FunSignature"

@dataclass(frozen=True)
class RepeatedType(TypeTree):
	""" The type of a `...rest` parameter, as seen from one element """
	underlying: TypeTree

@dataclass(frozen=True)
class UnionType(TypeTree):
	left: TypeTree
	right: TypeTree

@dataclass(frozen=True)
class TupleType(TypeTree):
	elements: tuple[TypeTree, ...]

@dataclass(frozen=True)
class TypeQuery(TypeTree):
	""" typeof some.expression """
	expr: tuple[Ident, ...]

@dataclass(frozen=True)
class Literal(Tree):
	value: Any

@dataclass(frozen=True)
class ConstantType(TypeTree):
	""" A type with exactly one value, like the string literal "click" """
	literal: Literal

def core(text:str) -> TypeRef:
	return TypeRef(CoreType(text))

ANY = core("any")
DYNAMIC = core("dynamic")
VOID = core("void")

##################################################################
# Signatures

@dataclass(frozen=True)
class TypeParam(Tree):
	name: TypeName
	upper_bound: Optional[TypeTree] = None

@dataclass(frozen=True)
class FunParam(Tree):
	name: Ident
	optional: bool = False
	tpe: Optional[TypeTree] = None

	def type_or_any(self) -> TypeTree:
		return ANY if self.tpe is None else self.tpe

@dataclass(frozen=True)
class FunSignature(Tree):
	tparams: tuple[TypeParam, ...] = ()
	params: tuple[FunParam, ...] = ()
	result_type: Optional[TypeTree] = None

##################################################################
# Members

@dataclass(frozen=True)
class MemberTree(Tree):
	pass

@dataclass(frozen=True)
class CallMember(MemberTree):
	signature: FunSignature

@dataclass(frozen=True)
class ConstructorMember(MemberTree):
	signature: FunSignature

@dataclass(frozen=True)
class IndexMember(MemberTree):
	index_name: Ident
	index_type: TypeTree
	value_type: TypeTree

@dataclass(frozen=True)
class PropertyMember(MemberTree):
	name: PropertyName
	optional: bool
	tpe: TypeTree

@dataclass(frozen=True)
class FunctionMember(MemberTree):
	name: PropertyName
	optional: bool
	signature: FunSignature

##################################################################
# Declarations

@dataclass(frozen=True)
class DeclTree(Tree):
	pass

@dataclass(frozen=True)
class ModuleDecl(DeclTree):
	name: Ident
	members: tuple[DeclTree, ...]

@dataclass(frozen=True)
class VarDecl(DeclTree):
	name: Ident
	tpe: Optional[TypeTree] = None

@dataclass(frozen=True)
class TypeDecl(DeclTree):
	name: TypeName
	tpe: TypeTree

@dataclass(frozen=True)
class InterfaceDecl(DeclTree):
	name: TypeName
	tparams: tuple[TypeParam, ...]
	inheritance: tuple[TypeRef, ...]
	members: tuple[MemberTree, ...]

@dataclass(frozen=True)
class FunctionDecl(DeclTree):
	name: Ident
	signature: FunSignature

@dataclass(frozen=True)
class EnumDecl(DeclTree):
	name: TypeName
	members: tuple[Ident, ...]

@dataclass(frozen=True)
class ClassDecl(DeclTree):
	name: TypeName
	tparams: tuple[TypeParam, ...]
	parent: Optional[TypeRef]
	implements: tuple[TypeRef, ...]
	members: tuple[MemberTree, ...]

@dataclass(frozen=True)
class ImportDecl(DeclTree):
	name: Ident
	path: str
