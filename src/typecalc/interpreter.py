import logging
from typing import Callable, TypeAlias

from typecalc.c_types import Type, parse_type, is_type_literal
from typecalc.environment import Environment
from typecalc.errors import TypeCheckError, UndeclaredVariable

logger = logging.getLogger(__name__)

Command: TypeAlias = Callable[[list[str], Environment], str]


def require_args(command: str, args: list[str], count: int) -> None:
    if len(args) != count:
        raise TypeCheckError(f"{command} takes {count} argument(s) but {len(args)} were given")


def declare_variable(args: list[str], env: Environment) -> str:
    require_args("declare_var", args, 2)
    name, type_token = args
    var_type: Type = parse_type(type_token)
    env.declare_variable(name, var_type)
    return f"{name} :: {var_type}"


def declare_function(args: list[str], env: Environment) -> str:
    require_args("declare_func", args, 3)
    name, input_token, output_token = args
    input_type: Type = parse_type(input_token)
    output_type: Type = parse_type(output_token)
    env.declare_function(name, input_type, output_type)
    return f"{name} :: {input_type} -> {output_type}"


def resolve_argument(token: str, env: Environment) -> Type:
    """ A type name stands for a value of that type, anything else must be a declared variable."""
    if is_type_literal(token):
        return parse_type(token)

    var_type: Type | None = env.variable_type(token)
    if var_type is None:
        raise UndeclaredVariable(f'Variable "{token}" is not declared')
    return var_type


def call_function(args: list[str], env: Environment) -> str:
    if not args:
        raise TypeCheckError("call needs a function name")

    name, *arg_tokens = args
    arg_types: list[Type] = [resolve_argument(token, env) for token in arg_tokens]
    return_type: Type = env.call_function(name, arg_types)
    return f"Called function {name} with return type {return_type}"


def show_declaration(args: list[str], env: Environment) -> str:
    require_args("show", args, 1)
    name = args[0]
    return f"{name} :: {env.lookup(name)}"


commands: dict[str, Command] = {
    "declare_var": declare_variable,
    "declare_func": declare_function,
    "call": call_function,
    "show": show_declaration,
}


def process_input(line: str, env: Environment) -> str:
    tokens: list[str] = line.split()
    if not tokens:
        return ""

    keyword, *args = tokens
    command: Command | None = commands.get(keyword)
    if command is None:
        raise TypeCheckError(f'Unknown command "{keyword}"')

    logger.debug("%s %s", keyword, args)
    return command(args, env)
