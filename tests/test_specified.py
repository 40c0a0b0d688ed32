from graphql import (
    DirectiveLocation,
    GraphQLBoolean,
    GraphQLNonNull,
    GraphQLSkipDirective as CoreSkipDirective,
    GraphQLString,
    Undefined,
)

from graphql_directives import (
    DEFAULT_DEPRECATION_REASON,
    Directive,
    GraphQLDeprecatedDirective,
    GraphQLIncludeDirective,
    GraphQLSkipDirective,
    get_specified_directive,
    is_specified_directive,
    specified_directives,
)


class TestSpecifiedDirectives:

    def test_include_directive(self):
        assert str(GraphQLIncludeDirective) == "@include"
        assert GraphQLIncludeDirective.locations == (
            DirectiveLocation.FIELD,
            DirectiveLocation.FRAGMENT_SPREAD,
            DirectiveLocation.INLINE_FRAGMENT,
        )

        (arg,) = GraphQLIncludeDirective.args
        assert arg.name == "if"
        assert arg.description == "Included when true."
        assert isinstance(arg.type, GraphQLNonNull)
        assert arg.type.of_type is GraphQLBoolean
        assert arg.default_value is Undefined

    def test_skip_directive(self):
        assert str(GraphQLSkipDirective) == "@skip"
        assert GraphQLSkipDirective.locations == GraphQLIncludeDirective.locations

        (arg,) = GraphQLSkipDirective.args
        assert arg.name == "if"
        assert arg.description == "Skipped when true."
        assert arg.type.of_type is GraphQLBoolean
        assert arg.default_value is Undefined

    def test_deprecated_directive(self):
        assert DEFAULT_DEPRECATION_REASON == "No longer supported"
        assert str(GraphQLDeprecatedDirective) == "@deprecated"
        assert GraphQLDeprecatedDirective.locations == (
            DirectiveLocation.FIELD_DEFINITION,
            DirectiveLocation.ENUM_VALUE,
        )

        reason = GraphQLDeprecatedDirective.arg("reason")
        assert reason.type is GraphQLString
        assert reason.default_value == "No longer supported"

    def test_specified_directives(self):
        assert specified_directives == (
            GraphQLIncludeDirective,
            GraphQLSkipDirective,
            GraphQLDeprecatedDirective,
        )
        assert [str(d) for d in specified_directives] == [
            "@include",
            "@skip",
            "@deprecated",
        ]

    def test_is_specified_directive(self):
        for directive in specified_directives:
            assert is_specified_directive(directive)

        custom = Directive("custom", [DirectiveLocation.FIELD])
        assert not is_specified_directive(custom)

    def test_is_specified_directive_by_name(self):
        # A different instance sharing a built in name counts as specified
        custom_skip = Directive("skip", [DirectiveLocation.QUERY])

        assert custom_skip is not GraphQLSkipDirective
        assert is_specified_directive(custom_skip)
        assert is_specified_directive(CoreSkipDirective)
        assert not is_specified_directive(Directive("Skip", []))
        assert not is_specified_directive(Directive("skipped", []))

    def test_get_specified_directive(self):
        assert get_specified_directive("include") is GraphQLIncludeDirective
        assert get_specified_directive("deprecated") is GraphQLDeprecatedDirective
        assert get_specified_directive("specifiedBy") is None
