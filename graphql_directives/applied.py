from typing import Any, Dict, List

from graphql import ast_from_value, is_input_type, print_ast

from graphql_directives.directives import Directive, assert_directive
from graphql_directives.error import DirectiveConfigError
from graphql_directives.utils import to_camel_case


class AppliedDirective:
    """
    A directive together with the argument values it is applied with,
    e.g. `@deprecated(reason: "Use name instead")`.
    """

    def __init__(self, directive: Directive, args: Dict[str, Any] = None):
        self.directive = assert_directive(directive)
        self.args = args or {}

    def print(self) -> str:
        directive_name = str(self.directive)
        if len(self.directive.args) == 0:
            return directive_name

        formatted_args = []

        # Values are printed as GraphQL literals of the argument's type
        for key, value in self.args.items():
            argument = self.directive.arg(to_camel_case(key))
            if value is None or argument is None:
                continue

            if not is_input_type(argument.type):
                raise DirectiveConfigError(
                    f"{directive_name}({argument.name}:) value cannot be "
                    f"printed, its type {argument.type!r} is not a GraphQL "
                    f"input type."
                )

            value_ast = ast_from_value(value, argument.type)
            if value_ast is not None:
                formatted_args.append(f"{argument.name}: {print_ast(value_ast)}")

        if not formatted_args:
            return directive_name

        return f"{directive_name}({', '.join(formatted_args)})"

    def __str__(self):
        return self.print()


def add_applied_directives(value, directives: List[AppliedDirective]):
    if directives:
        if hasattr(value, "_applied_directives"):
            directives = [*directives, *getattr(value, "_applied_directives", [])]

        value._applied_directives = directives
    return value


def get_applied_directives(value) -> List[AppliedDirective]:
    if hasattr(value, "_applied_directives"):
        return getattr(value, "_applied_directives")
    return []
