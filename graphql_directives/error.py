from graphql import GraphQLError


class DirectiveError(GraphQLError):
    """
    Base error for directive definitions. Errors raised while building a
    directive from SDL carry the offending nodes, so they report the
    source location like any other GraphQL error.
    """

    def __init__(
        self,
        message,
        nodes=None,
        source=None,
        positions=None,
        path=None,
        original_error=None,
        extensions=None
    ):

        super(DirectiveError, self).__init__(
            message=message,
            nodes=nodes,
            source=source,
            positions=positions,
            path=path,
            original_error=original_error,
            extensions=extensions
        )
        self.extensions = extensions


class DirectiveConfigError(DirectiveError):
    """
    Raised when a directive configuration has the wrong shape.
    """
    pass


class DirectiveInvariantError(DirectiveError):
    """
    Raised when a value expected to be a directive is not one.
    """
    pass
