from dataclasses import dataclass

from typecalc.errors import TypeCheckError


@dataclass(frozen=True)
class Type:
    name: str

    def __str__(self) -> str:
        return self.name


Int = Type("Int")
Float = Type("Float")
Bool = Type("Bool")


@dataclass(frozen=True)
class FunType:
    params: tuple[Type, ...]
    return_type: Type

    def __str__(self) -> str:
        return " -> ".join(str(typ) for typ in (*self.params, self.return_type))


known_types: dict[str, Type] = {"Int": Int, "Float": Float, "Bool": Bool}


def is_type_literal(token: str) -> bool:
    return token in known_types


def parse_type(token: str) -> Type:
    if token in known_types:
        return known_types[token]
    raise TypeCheckError(f'Unknown type "{token}"')
