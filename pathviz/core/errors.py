class PathvizError(Exception):
    pass


class UserInputError(PathvizError):
    """A run was requested without a start or goal cell."""
    pass


class InvalidStepInvocation(PathvizError):
    """step() called after the search ended, or on a state reset since it began."""
    pass
