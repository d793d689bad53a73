import logging
from dataclasses import dataclass, field

from typecalc.c_types import Int, Float, Bool, Type, FunType
from typecalc.errors import TypeCheckError, UndeclaredFunction, UndeclaredVariable
from typecalc.symtab import SymTab

logger = logging.getLogger(__name__)


def builtin_functions() -> SymTab[FunType]:
    return SymTab({
        "add": FunType((Int,), Int),
        "sub": FunType((Int,), Int),
        "mul": FunType((Int,), Int),
        "div": FunType((Int,), Float),
        "and": FunType((Bool,), Bool),
    })


@dataclass
class Environment:
    """ Registry of declared variable types and function signatures.

    User functions are kept in a table whose parent holds the built-ins, so a
    declaration with a built-in's name shadows it for the rest of the session.
    """
    variables: SymTab[Type] = field(default_factory=SymTab)
    functions: SymTab[FunType] = field(default_factory=lambda: SymTab(parent=builtin_functions()))

    def declare_variable(self, name: str, var_type: Type) -> None:
        logger.debug("variable %s :: %s", name, var_type)
        self.variables.add_local(name, var_type)

    def declare_function(self, name: str, input_type: Type, output_type: Type) -> None:
        # Declared functions always take exactly one parameter.
        signature = FunType((input_type,), output_type)
        logger.debug("function %s :: %s", name, signature)
        self.functions.add_local(name, signature)

    def variable_type(self, name: str) -> Type | None:
        return self.variables.get_value(name)

    def call_function(self, name: str, args: list[Type] | tuple[Type, ...]) -> Type:
        signature: FunType | None = self.functions.get_value(name)
        if signature is None:
            raise UndeclaredFunction(f'Function "{name}" is not declared')

        if len(signature.params) != len(args):
            raise TypeCheckError(
                f'Function "{name}" takes {len(signature.params)} argument(s) but {len(args)} were given')

        for i, (expect, got) in enumerate(zip(signature.params, args)):
            if expect != got:
                raise TypeCheckError(f'Function "{name}" parameter {i + 1} expected {expect}, got {got}')

        return signature.return_type

    def lookup(self, name: str) -> Type | FunType:
        var_type: Type | None = self.variables.get_value(name)
        if var_type is not None:
            return var_type

        signature: FunType | None = self.functions.get_value(name)
        if signature is not None:
            return signature

        raise UndeclaredVariable(f'"{name}" is neither a variable nor a function')
