# eventsearch/utils/errors.py
class EventSearchError(RuntimeError):
    """Base class for every error raised by eventsearch itself."""


class NilSubjectError(EventSearchError, ValueError):
    """
    A Subject (or the factory that builds one) was None / is_nil().
    Precondition failure: raised before any search work happens.
    """

    def __init__(self, where: str):
        super().__init__(f"{where}: subject must not be nil")
        self.where = where


class NilParameterError(EventSearchError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"parameter {name!r} must not be None")
        self.name = name


class HistoryEndedError(EventSearchError):
    """
    The driver tried to replay past the end of a recorded history.
    Internal bookkeeping fault, never a per-branch condition.
    """


class NoTeamsFoundError(EventSearchError):
    pass


class TeamEvaluationError(EventSearchError):
    """
    Raised by evaluate_teams(strict=True) when the enemy function failed
    on some branch. The original exception is chained as __cause__.
    """


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (roster files, CLI options).
    Should NOT print traceback.
    """
