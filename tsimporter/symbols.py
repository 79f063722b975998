"""
The symbol tree which the importer builds and the printer prints.

Containers (packages, modules, classes) keep their members in the order
they were first encountered, because that is the order they get printed.
Beside that list, each container keeps a name-index per kind of child,
so that "get-or-create" is a dictionary lookup and a class may share its
name with a module (its companion) without confusion.
"""
from typing import Optional, Iterable
from .ontology import Symbol, EMPTY, name
from .typeref import TypeRef, ANY, DYNAMIC

class CommentSymbol(Symbol):
	""" Placeholder for something the importer did not understand. """
	def __init__(self, text:str):
		super().__init__(EMPTY)
		self.text = text
	def __repr__(self): return "{/* %s */}" % self.text

class FieldSymbol(Symbol):
	tpe: TypeRef
	def __init__(self, nom:str, tpe:TypeRef=ANY):
		super().__init__(nom)
		self.tpe = tpe

class ParamSymbol(Symbol):
	tpe: TypeRef
	optional: bool
	def __init__(self, nom:str, tpe:TypeRef=ANY, optional:bool=False):
		super().__init__(nom)
		self.tpe, self.optional = tpe, optional
	def __repr__(self): return "<:%s:%s>" % (self.name, self.tpe)

class TypeParamSymbol(Symbol):
	upper_bound: Optional[TypeRef]
	def __init__(self, nom:str, upper_bound:Optional[TypeRef]=None):
		super().__init__(nom)
		self.upper_bound = upper_bound
	def key(self): return self.name, self.upper_bound

class MethodSymbol(Symbol):
	tparams: list[TypeParamSymbol]
	params: list[ParamSymbol]
	result_type: TypeRef
	is_bracket_access: bool

	def __init__(self, nom:str):
		super().__init__(nom)
		self.tparams = []
		self.params = []
		self.result_type = DYNAMIC
		self.is_bracket_access = False

	def signature_key(self) -> tuple:
		"""
		Two methods with the same key cannot both be declared in the host language,
		because it overloads on neither parameter names nor result types.
		Bracket accessors live apart from ordinary methods of the same name.
		"""
		return (
			self.name,
			self.is_bracket_access,
			tuple(tp.key() for tp in self.tparams),
			tuple((p.tpe, p.optional) for p in self.params),
		)

	def __repr__(self):
		p = ", ".join(map(repr, self.params))
		return "{def %s(%s)}" % (self.name, p)

class ContainerSymbol(Symbol):
	members: list[Symbol]

	def __init__(self, nom:str):
		super().__init__(nom)
		self.members = []
		self._classes = {}
		self._modules = {}
		self._fields = {}
		self._signatures = set()

	def find_class(self, nom:str) -> Optional["ClassSymbol"]:
		return self._classes.get(nom)

	def find_module(self, nom:str) -> Optional["ModuleSymbol"]:
		return self._modules.get(nom)

	def get_class_or_create(self, nom:str) -> "ClassSymbol":
		nom = name(nom)
		if nom not in self._classes:
			clazz = self._classes[nom] = self._append(ClassSymbol(nom))
			companion = self._modules.get(nom)
			if companion is not None: _link(clazz, companion)
		return self._classes[nom]

	def get_module_or_create(self, nom:str) -> "ModuleSymbol":
		nom = name(nom)
		if nom not in self._modules:
			module = self._modules[nom] = self._append(ModuleSymbol(nom))
			companion = self._classes.get(nom)
			if companion is not None: _link(companion, module)
		return self._modules[nom]

	def new_field(self, nom:str, tpe:TypeRef) -> Optional[FieldSymbol]:
		""" Returns None if there is already a field by that name. The first one wins. """
		nom = name(nom)
		if nom in self._fields: return None
		field = self._fields[nom] = self._append(FieldSymbol(nom, tpe))
		return field

	def add_method(self, method:MethodSymbol) -> bool:
		""" Keep the method unless it duplicates one already here. Returns whether it was kept. """
		key = method.signature_key()
		if key in self._signatures: return False
		self._signatures.add(key)
		self._append(method)
		return True

	def add_comment(self, text:str) -> CommentSymbol:
		return self._append(CommentSymbol(text))

	def methods(self, nom:Optional[str]=None) -> list[MethodSymbol]:
		return [
			m for m in self.members
			if isinstance(m, MethodSymbol) and (nom is None or m.name == nom)
		]

	def fields(self) -> list[FieldSymbol]:
		return [f for f in self.members if isinstance(f, FieldSymbol)]

	def _append(self, symbol):
		self.members.append(symbol)
		return symbol

class PackageSymbol(ContainerSymbol):
	def __init__(self, nom:str):
		super().__init__(nom)
		self._packages = {}

	def __repr__(self): return "package %s" % (self.name or "<root>")

	def find_package(self, nom:str) -> Optional["PackageSymbol"]:
		return self._packages.get(nom)

	def get_package_or_create(self, nom:str) -> "PackageSymbol":
		nom = name(nom)
		if nom not in self._packages:
			self._packages[nom] = self._append(PackageSymbol(nom))
		return self._packages[nom]

class ModuleSymbol(ContainerSymbol):
	companion_class: Optional["ClassSymbol"] = None
	def __repr__(self): return "object %s" % self.name

class ClassSymbol(ContainerSymbol):
	tparams: list[TypeParamSymbol]
	parents: list[TypeRef]
	is_trait: bool
	companion_module: Optional[ModuleSymbol] = None

	def __init__(self, nom:str):
		super().__init__(nom)
		self.tparams = []
		self.parents = []
		self.is_trait = True

	def __repr__(self): return "%s %s" % ("trait" if self.is_trait else "class", self.name)

	def add_parents(self, parents:Iterable[TypeRef]):
		for parent in parents:
			if parent not in self.parents:
				self.parents.append(parent)

def _link(clazz:ClassSymbol, module:ModuleSymbol):
	clazz.companion_module = module
	module.companion_class = clazz
