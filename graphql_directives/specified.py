from typing import Any, Optional, Tuple

from graphql import (
    DirectiveLocation,
    GraphQLBoolean,
    GraphQLNonNull,
    GraphQLString,
)

from graphql_directives.directives import Directive


# @include(if: Boolean!) on FIELD | FRAGMENT_SPREAD | INLINE_FRAGMENT
GraphQLIncludeDirective = Directive(
    name="include",
    description="Directs the executor to include this field or fragment only "
    "when the `if` argument is true.",
    locations=[
        DirectiveLocation.FIELD,
        DirectiveLocation.FRAGMENT_SPREAD,
        DirectiveLocation.INLINE_FRAGMENT,
    ],
    args={
        "if": {
            "type": GraphQLNonNull(GraphQLBoolean),
            "description": "Included when true.",
        }
    },
)


# @skip(if: Boolean!) on FIELD | FRAGMENT_SPREAD | INLINE_FRAGMENT
GraphQLSkipDirective = Directive(
    name="skip",
    description="Directs the executor to skip this field or fragment when the "
    "`if` argument is true.",
    locations=[
        DirectiveLocation.FIELD,
        DirectiveLocation.FRAGMENT_SPREAD,
        DirectiveLocation.INLINE_FRAGMENT,
    ],
    args={
        "if": {
            "type": GraphQLNonNull(GraphQLBoolean),
            "description": "Skipped when true.",
        }
    },
)


# Default reason for a deprecation
DEFAULT_DEPRECATION_REASON = "No longer supported"


# @deprecated(reason: String = "No longer supported")
#    on FIELD_DEFINITION | ENUM_VALUE
GraphQLDeprecatedDirective = Directive(
    name="deprecated",
    description="Marks an element of a GraphQL schema as no longer supported.",
    locations=[
        DirectiveLocation.FIELD_DEFINITION,
        DirectiveLocation.ENUM_VALUE,
    ],
    args={
        "reason": {
            "type": GraphQLString,
            "description": "Explains why this element was deprecated, usually "
            "also including a suggestion for how to access supported similar "
            "data. Formatted using the Markdown syntax (as specified by "
            "[CommonMark](https://commonmark.org/).",
            "default_value": DEFAULT_DEPRECATION_REASON,
        }
    },
)


specified_directives: Tuple[Directive, ...] = (
    GraphQLIncludeDirective,
    GraphQLSkipDirective,
    GraphQLDeprecatedDirective,
)


def is_specified_directive(directive: Any) -> bool:
    """
    Check whether a directive is one of the specified directives.

    The comparison is by name only. A custom directive called `skip` is
    reported as specified, which is what schema validation relies on to
    detect a schema overriding one of the built in directives.
    """
    return any(
        specified_directive.name == directive.name
        for specified_directive in specified_directives
    )


def get_specified_directive(name: str) -> Optional[Directive]:
    for specified_directive in specified_directives:
        if specified_directive.name == name:
            return specified_directive
    return None
