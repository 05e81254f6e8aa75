"""Domain-specific exceptions"""


class ModulbankError(Exception):
    """Base exception for the modulbank client"""

    pass


class BankAPIError(ModulbankError):
    """Request to the bank API could not be completed"""

    pass


class RequestBuildError(BankAPIError):
    """Request payload or URL could not be built"""

    pass


class TransportError(BankAPIError):
    """Network or IO failure while talking to the bank API"""

    pass


class UnexpectedStatus(BankAPIError):
    """Bank API answered with a status code other than the expected one"""

    def __init__(self, status_code: int):
        super().__init__(f"unexpected status code {status_code}")
        self.status_code = status_code


class DecodeError(ModulbankError):
    """Response body is not valid JSON or does not match the wire schema"""

    pass


class InvalidEnumValue(DecodeError):
    """Wire string is outside the closed vocabulary of an enum"""

    def __init__(self, domain: str, value: str):
        super().__init__(f"invalid {domain}: {value}")
        self.domain = domain
        self.value = value


class MalformedTimestamp(DecodeError):
    """Wire timestamp does not match the bank date format"""

    def __init__(self, value: str):
        super().__init__(f"malformed timestamp: {value!r}")
        self.value = value


class MalformatedNumber(DecodeError):
    """Balance body is not a decimal literal"""

    def __init__(self, value: str):
        super().__init__(f"malformated number: {value!r}")
        self.value = value
