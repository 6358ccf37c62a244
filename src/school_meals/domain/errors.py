"""Error taxonomy for meal lookups."""


class MealLookupError(Exception):
    """Base class for errors that end a meal lookup."""


class EmptyInputError(MealLookupError):
    """No date was supplied, so no query is issued."""


class NetworkError(MealLookupError):
    """The meal service could not be reached or answered with a failure status."""


class NoDataResult(MealLookupError):
    """The service answered, but there is no meal information for the date."""
