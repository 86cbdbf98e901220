
class LedgerError(Exception):
    """
    The base exception for ledger operations. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class NonexistentToken(LedgerError):
    """
    The token identifier has no recorded owner

    :ivar token_id: The identifier that was queried
    """
    fmt = "Token '{token_id}' does not exist"


class InvalidAddress(LedgerError):
    """
    The null identity was passed where a real owner is required

    :ivar address: The offending identity
    """
    fmt = "Address '{address}' is not a valid owner"


class InvalidRecipient(LedgerError):
    fmt = "Cannot transfer to the null address '{address}'"


class CallerNotAuthorized(LedgerError):
    """
    The caller is neither the owner, the approved delegate nor an
    operator of the owner

    :ivar caller: The identity that attempted the operation
    :ivar token_id: The token it was attempted on
    """
    fmt = "Caller '{caller}' is not the owner or approved for token '{token_id}'"


NotOwnerOrApproved = CallerNotAuthorized


class OwnerMismatch(LedgerError):
    fmt = "Token '{token_id}' is owned by '{owner}', not '{sender}'"


class InvariantViolation(Exception):
    """
    Bookkeeping went out of range. This is a bug in the ledger, not bad input,
    and is never turned into a failed status code.
    """


class InvalidEnvironment(LedgerError):
    """
    An environment reading is missing or cannot be packed into the seed.
    Clock and block readings must be whole numbers in the uint256 range.

    :ivar key: The environment key that was read
    :ivar value: What the environment held for it
    """
    fmt = "Environment reading '{key}' is unusable: {value!r}"
