import inspect
import typing_inspect

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from graphql import (
    DirectiveDefinitionNode,
    DirectiveLocation,
    GraphQLArgument,
    GraphQLType,
    InputValueDefinitionNode,
    Undefined,
)
from graphql.pyutils import inspect as inspect_value

from graphql_directives.error import DirectiveConfigError, DirectiveInvariantError
from graphql_directives.mapper import map_argument_type


def is_directive(directive: Any) -> bool:
    """
    Test if the given value is a GraphQL directive.
    """
    return isinstance(directive, Directive)


def assert_directive(directive: Any) -> "Directive":
    if not is_directive(directive):
        raise DirectiveInvariantError(
            f"Expected {inspect_value(directive)} to be a GraphQL directive."
        )
    return directive


@dataclass(frozen=True)
class Argument:
    name: str
    type: Any
    description: Optional[str] = None
    default_value: Any = Undefined
    ast_node: Optional[InputValueDefinitionNode] = None


def is_type_hint(value: Any) -> bool:
    return (
        isinstance(value, GraphQLType)
        or inspect.isclass(value)
        or typing_inspect.is_union_type(value)
        or typing_inspect.get_origin(value) is not None
    )


def map_type(type_: Any, name: str, directive: str) -> Any:
    # Only Python type hints are mapped, any other type reference is copied
    # as is and left for the schema to validate
    if isinstance(type_, GraphQLType) or not is_type_hint(type_):
        return type_
    return map_argument_type(type_, name=name, directive=directive)


class Directive:
    """
    Directives are used by the GraphQL runtime as a way of modifying execution
    behavior. Type system creators will usually not create these directly.

    A directive is immutable once created, its `locations` and `args` are
    stored as tuples.
    """

    name: str
    description: Optional[str]
    locations: Tuple[DirectiveLocation, ...]
    args: Tuple[Argument, ...]
    ast_node: Optional[DirectiveDefinitionNode]

    def __init__(
        self,
        name: str,
        locations: Sequence[DirectiveLocation],
        args: Mapping[str, Any] = None,
        description: Optional[str] = None,
        ast_node: Optional[DirectiveDefinitionNode] = None
    ):
        if not name or not isinstance(name, str):
            raise DirectiveConfigError(
                "Directive must be named.",
                nodes=ast_node
            )

        if not isinstance(locations, (list, tuple)):
            raise DirectiveConfigError(
                f"@{name} locations must be an Array.",
                nodes=ast_node
            )

        if args is None:
            args = {}

        if not isinstance(args, Mapping):
            raise DirectiveConfigError(
                f"@{name} args must be an object with argument names as keys.",
                nodes=ast_node
            )

        set_attr = super().__setattr__
        set_attr("name", name)
        set_attr("description", description)
        set_attr("locations", tuple(locations))
        set_attr("ast_node", ast_node)
        set_attr("args", tuple(
            self.map_to_argument(arg_name, arg)
            for arg_name, arg in args.items()
        ))

    def map_to_argument(self, arg_name: str, arg: Any) -> Argument:
        if isinstance(arg, Argument):
            return Argument(
                name=arg_name,
                type=arg.type,
                description=arg.description,
                default_value=arg.default_value,
                ast_node=arg.ast_node
            )

        if isinstance(arg, GraphQLArgument):
            return Argument(
                name=arg_name,
                type=arg.type,
                description=arg.description,
                default_value=arg.default_value,
                ast_node=arg.ast_node
            )

        if isinstance(arg, Mapping):
            return Argument(
                name=arg_name,
                type=map_type(arg.get("type"), arg_name, self.name),
                description=arg.get("description"),
                default_value=arg.get(
                    "default_value", arg.get("defaultValue", Undefined)
                ),
                ast_node=arg.get("ast_node", arg.get("astNode"))
            )

        if is_type_hint(arg):
            return Argument(
                name=arg_name,
                type=map_type(arg, arg_name, self.name)
            )

        raise DirectiveConfigError(
            f"@{self.name}({arg_name}:) argument must be a type or an "
            f"argument config.",
            nodes=self.ast_node
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Directive":
        """
        Create a directive from a configuration record with the keys
        `name`, `locations`, and optionally `args`, `description` and
        `ast_node` (`astNode` is accepted as well).
        """
        return cls(
            name=config.get("name"),
            locations=config.get("locations"),
            args=config.get("args"),
            description=config.get("description"),
            ast_node=config.get("ast_node", config.get("astNode"))
        )

    def to_kwargs(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "locations": self.locations,
            "args": {arg.name: arg for arg in self.args},
            "description": self.description,
            "ast_node": self.ast_node
        }

    def arg(self, name: str) -> Optional[Argument]:
        for argument in self.args:
            if argument.name == name:
                return argument
        return None

    def to_json(self) -> str:
        return str(self)

    def __setattr__(self, key, value):
        raise AttributeError(f"{self!r} is immutable, cannot set '{key}'.")

    def __delattr__(self, key):
        raise AttributeError(f"{self!r} is immutable, cannot delete '{key}'.")

    def __str__(self):
        return f"@{self.name}"

    def __repr__(self):
        return f"<{self.__class__.__name__}({self})>"
