class APIFailureException(Exception):
    """ Raised when the open data portal cannot be reached or errors out """
    pass


class ValidationException(Exception):
    """ Raised when caller-supplied parameters are missing or malformed """
    pass


class RegistrationException(Exception):
    pass


class PlateWatchException(Exception):
    pass


class PlateNotFoundException(PlateWatchException):
    pass
