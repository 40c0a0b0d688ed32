# flake8: noqa

from graphql_directives.error import \
    DirectiveError, \
    DirectiveConfigError, \
    DirectiveInvariantError

from graphql_directives.directives import \
    Argument, \
    Directive, \
    is_directive, \
    assert_directive

from graphql_directives.specified import \
    GraphQLIncludeDirective, \
    GraphQLSkipDirective, \
    GraphQLDeprecatedDirective, \
    DEFAULT_DEPRECATION_REASON, \
    specified_directives, \
    is_specified_directive, \
    get_specified_directive

from graphql_directives.mapper import map_argument_type

from graphql_directives.sdl import \
    directive_from_ast, \
    directives_from_sdl, \
    to_graphql_directive, \
    from_graphql_directive, \
    print_directive

from graphql_directives.applied import \
    AppliedDirective, \
    add_applied_directives, \
    get_applied_directives
