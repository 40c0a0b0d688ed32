import enum
import inspect
import typing_inspect

from collections import OrderedDict
from uuid import UUID

from typing import List, Dict, Type, Tuple, Any
from typing_inspect import get_origin

from graphql import (
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLScalarType,
    GraphQLString,
    GraphQLType,
    is_input_type,
)

from graphql_directives.error import DirectiveConfigError


scalar_map: List[Tuple[Tuple[Type, ...], GraphQLScalarType]] = [
    ((UUID,), GraphQLID),
    ((str,), GraphQLString),
    ((bool,), GraphQLBoolean),
    ((int,), GraphQLInt),
    ((float,), GraphQLFloat),
]

_enum_registry: Dict[Type[enum.Enum], GraphQLEnumType] = {}


def scalar_classes():
    classes = []
    for scalar_class_map in scalar_map:
        for scalar_class in scalar_class_map[0]:
            classes.append(scalar_class)
    return classes


def map_to_scalar(class_type: Type) -> GraphQLScalarType:
    # bool is a subclass of int, so order in scalar_map matters
    for test_types, graphql_type in scalar_map:
        for test_type in test_types:
            if issubclass(class_type, test_type):
                return graphql_type


def map_to_enum(enum_type: Type[enum.Enum]) -> GraphQLEnumType:
    graphql_type = _enum_registry.get(enum_type)

    if graphql_type is None:
        values = OrderedDict([
            (name, GraphQLEnumValue(member))
            for name, member in enum_type.__members__.items()
        ])
        graphql_type = GraphQLEnumType(
            name=f"{enum_type.__name__}Enum",
            values=values,
            description=inspect.getdoc(enum_type)
        )
        _enum_registry[enum_type] = graphql_type

    return graphql_type


def argument_label(name: str, directive: str = None) -> str:
    if directive:
        return f"@{directive}({name}:)"
    return f"Argument '{name}'"


def map_argument_type(
    type_: Any,
    name: str = "",
    directive: str = None
) -> GraphQLType:
    """
    Map a Python type hint to a GraphQL input type.

    GraphQL input types are returned unchanged. Python types are non-null
    unless wrapped in `Optional`, matching how field arguments are mapped
    from function signatures. Errors name the directive when one is given.
    """
    label = argument_label(name, directive)

    if isinstance(type_, GraphQLType):
        if not is_input_type(type_):
            raise DirectiveConfigError(
                f"{label} type {type_} is not a GraphQL input type."
            )
        return type_

    nullable = False

    if typing_inspect.is_union_type(type_):
        none_type = type(None)
        all_args = typing_inspect.get_args(type_, evaluate=True)
        union_args = [arg for arg in all_args if arg is not none_type]
        nullable = none_type in all_args

        if len(union_args) != 1:
            raise DirectiveConfigError(
                f"{label} type {type_} could not be mapped to a "
                f"GraphQL input type, unions are not valid input types."
            )
        type_ = union_args[0]

    graphql_type = _map(type_, name, directive)

    if nullable:
        return graphql_type

    return GraphQLNonNull(graphql_type)


def _map(type_: Any, name: str, directive: str = None) -> GraphQLType:
    label = argument_label(name, directive)
    origin_type = get_origin(type_)

    if inspect.isclass(origin_type) and issubclass(origin_type, list):
        list_args = typing_inspect.get_args(type_, evaluate=True)
        if not list_args:
            raise DirectiveConfigError(
                f"{label} type {type_} is missing its item type, "
                f"use List[<type>]."
            )
        return GraphQLList(
            map_argument_type(list_args[0], name=name, directive=directive)
        )

    if inspect.isclass(type_):
        if issubclass(type_, enum.Enum):
            return map_to_enum(type_)

        if issubclass(type_, tuple(scalar_classes())):
            return map_to_scalar(type_)

    raise DirectiveConfigError(
        f"{label} type {type_} could not be mapped to a "
        f"GraphQL input type."
    )
