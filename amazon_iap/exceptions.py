class IapException(Exception):
    pass


class IapConfigError(IapException):
    pass


class IapTransportError(IapException):
    "The request never got a response from amazon"

    timeout = False

    def __init__(self, cause):
        self.cause = cause
        super().__init__(cause)

    def __str__(self):
        return str(self.cause)


class IapTimeout(IapTransportError):

    timeout = True


class IapVendorRejected(IapException):
    "Amazon answered with an error body. The text is exactly amazon's message, callers match on it."

    def __init__(self, message, status_code=None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __str__(self):
        return self.message


class IapDecodeError(IapException):
    def __init__(self, cause):
        self.cause = cause
        super().__init__(cause)

    def __str__(self):
        return str(self.cause)
