class RobloxException(Exception):
    def __init__(self, message=None, status=None):
        self.message = message
        self.status = status

        super().__init__(message)


class RobloxAPIError(RobloxException):
    pass

class RobloxNotFound(RobloxException):
    pass

class RobloxDown(RobloxException):
    pass

class RobloxUnauthorized(RobloxException):
    pass

class MissingAPIKey(RobloxException):
    pass
