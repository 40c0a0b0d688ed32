"""
Conversions between directive descriptors, GraphQL SDL and graphql-core's
own `GraphQLDirective`.
"""
from typing import Dict, List, Mapping, Union

from graphql import (
    DirectiveDefinitionNode,
    DirectiveLocation,
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLDirective,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLString,
    GraphQLType,
    ListTypeNode,
    NonNullTypeNode,
    Source,
    TypeNode,
    Undefined,
    parse,
    value_from_ast,
)
from graphql.utilities.print_schema import print_directive as print_graphql_directive

from graphql_directives.directives import Directive, assert_directive
from graphql_directives.error import DirectiveConfigError


specified_scalar_types: Dict[str, GraphQLNamedType] = {
    scalar.name: scalar
    for scalar in [
        GraphQLString,
        GraphQLInt,
        GraphQLFloat,
        GraphQLBoolean,
        GraphQLID,
    ]
}


def type_from_ast(
    type_node: TypeNode,
    types: Mapping[str, GraphQLNamedType]
) -> GraphQLType:
    if isinstance(type_node, ListTypeNode):
        return GraphQLList(type_from_ast(type_node.type, types))

    if isinstance(type_node, NonNullTypeNode):
        return GraphQLNonNull(type_from_ast(type_node.type, types))

    type_name = type_node.name.value
    named_type = types.get(type_name)

    if named_type is None:
        raise DirectiveConfigError(
            f"Unknown type '{type_name}'.",
            nodes=type_node
        )

    return named_type


def directive_from_ast(
    node: DirectiveDefinitionNode,
    types: Mapping[str, GraphQLNamedType] = None
) -> Directive:
    """
    Build a directive from its definition node, keeping the node (and the
    argument nodes) as `ast_node` back references.
    """
    if types is None:
        types = specified_scalar_types
    else:
        types = {**specified_scalar_types, **types}

    name = node.name.value
    args = {}

    for arg_node in node.arguments or []:
        arg_name = arg_node.name.value
        arg_type = type_from_ast(arg_node.type, types)
        default_value = Undefined

        if arg_node.default_value is not None:
            default_value = value_from_ast(arg_node.default_value, arg_type)
            if default_value is Undefined:
                raise DirectiveConfigError(
                    f"@{name}({arg_name}:) default value is not a valid "
                    f"{arg_type}.",
                    nodes=arg_node.default_value
                )

        args[arg_name] = {
            "type": arg_type,
            "description": (
                arg_node.description.value if arg_node.description else None
            ),
            "default_value": default_value,
            "ast_node": arg_node,
        }

    return Directive(
        name=name,
        description=node.description.value if node.description else None,
        locations=[
            DirectiveLocation[location.value] for location in node.locations
        ],
        args=args,
        ast_node=node,
    )


def directives_from_sdl(
    source: Union[str, Source],
    types: Mapping[str, GraphQLNamedType] = None
) -> List[Directive]:
    document = parse(source)

    return [
        directive_from_ast(definition, types)
        for definition in document.definitions
        if isinstance(definition, DirectiveDefinitionNode)
    ]


def to_graphql_directive(directive: Directive) -> GraphQLDirective:
    directive = assert_directive(directive)

    return GraphQLDirective(
        name=directive.name,
        locations=directive.locations,
        args={
            arg.name: GraphQLArgument(
                arg.type,
                default_value=arg.default_value,
                description=arg.description,
                ast_node=arg.ast_node,
            )
            for arg in directive.args
        },
        description=directive.description,
        ast_node=directive.ast_node,
    )


def from_graphql_directive(directive: GraphQLDirective) -> Directive:
    return Directive(
        name=directive.name,
        locations=list(directive.locations),
        args=dict(directive.args),
        description=directive.description,
        ast_node=directive.ast_node,
    )


def print_directive(directive: Directive) -> str:
    return print_graphql_directive(to_graphql_directive(directive))
