from artledger import config
from artledger.art.generator import render_token_uri
from artledger.db.driver import LedgerDriver
from artledger.db.orm import Hash, Variable
from artledger.exceptions import NonexistentToken, InvalidAddress, InvalidRecipient, CallerNotAuthorized, \
    OwnerMismatch, InvariantViolation, InvalidEnvironment
from artledger.execution.events import LogEvent
from artledger.execution.runtime import Runtime
from artledger.stdlib.bridge.access import export
from artledger.stdlib.bridge.hashing import sha3
from artledger.stdlib.bridge.time import Datetime

TransferEvent = LogEvent('Transfer', {
    'from': {'type': str, 'idx': True},
    'to': {'type': str, 'idx': True},
    'token_id': {'type': int, 'idx': True}
})

ApprovalEvent = LogEvent('Approval', {
    'owner': {'type': str, 'idx': True},
    'approved': {'type': str, 'idx': True},
    'token_id': {'type': int, 'idx': True}
})

ApprovalForAllEvent = LogEvent('ApprovalForAll', {
    'owner': {'type': str, 'idx': True},
    'operator': {'type': str, 'idx': True},
    'approved': {'type': bool}
})


def is_null(address):
    return address is None or address == '' or address == config.NULL_ADDRESS


# Identities are opaque and may contain storage delimiters. Tables indexed by identity use its digest as the key.
def identity_key(address):
    return sha3(str(address).encode('utf-8')).hex()


def environment_reading(key, value):
    if isinstance(value, Datetime):
        value = value.timestamp

    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= config.MAX_UINT256:
        raise InvalidEnvironment(key=key, value=value)

    return value


def checked_add(value, amount):
    result = value + amount
    if result > config.MAX_UINT256:
        raise InvariantViolation('uint256 overflow: {} + {}'.format(value, amount))
    return result


def checked_sub(value, amount):
    result = value - amount
    if result < 0:
        raise InvariantViolation('uint256 underflow: {} - {}'.format(value, amount))
    return result


class ArtLedger:
    """
    Ownership ledger for the collection. All state lives in the driver under the contract name, so a failed call is
    undone by discarding the driver's pending writes. The caller of every operation is read from the runtime context.
    """
    def __init__(self, driver: LedgerDriver, rt: Runtime, name=config.CONTRACT_NAME):
        self.rt = rt

        self.owners = Hash(name, 'owners', driver=driver)
        self.balances = Hash(name, 'balances', driver=driver, default_value=0)
        self.approvals = Hash(name, 'approvals', driver=driver)
        self.operators = Hash(name, 'operators', driver=driver, default_value=False)
        self.counter = Variable(name, 'counter', driver=driver, t=int, default_value=0)
        self.supply = Variable(name, 'supply', driver=driver, t=int, default_value=0)

    @property
    def ctx(self):
        return self.rt.context

    def _owner(self, token_id):
        owner = self.owners[token_id]
        if owner is None:
            raise NonexistentToken(token_id=token_id)
        return owner

    def _is_operator(self, owner, operator):
        return self.operators[identity_key(owner), identity_key(operator)] is True

    def _is_authorized(self, caller, owner, token_id):
        return caller == owner or \
               self.approvals[token_id] == caller or \
               self._is_operator(owner, caller)

    @export
    def name(self):
        return config.COLLECTION_NAME

    @export
    def symbol(self):
        return config.COLLECTION_SYMBOL

    @export
    def total_supply(self):
        return self.supply.get()

    @export
    def balance_of(self, owner):
        if is_null(owner):
            raise InvalidAddress(address=owner)
        return self.balances[identity_key(owner)]

    @export
    def owner_of(self, token_id):
        return self._owner(token_id)

    @export
    def approve(self, to, token_id):
        owner = self._owner(token_id)

        if not (self.ctx.caller == owner or self._is_operator(owner, self.ctx.caller)):
            raise CallerNotAuthorized(caller=self.ctx.caller, token_id=token_id)

        if is_null(to):
            del self.approvals[token_id]
            to = config.NULL_ADDRESS
        else:
            self.approvals[token_id] = to

        ApprovalEvent(self.rt, {'owner': owner, 'approved': to, 'token_id': token_id})

    @export
    def get_approved(self, token_id):
        self._owner(token_id)
        return self.approvals[token_id]

    @export
    def set_approval_for_all(self, operator, approved):
        self.operators[identity_key(self.ctx.caller), identity_key(operator)] = approved
        ApprovalForAllEvent(self.rt, {'owner': self.ctx.caller, 'operator': operator, 'approved': approved})

    @export
    def is_approved_for_all(self, owner, operator):
        return self._is_operator(owner, operator)

    @export
    def transfer_from(self, sender, to, token_id):
        owner = self._owner(token_id)

        if not self._is_authorized(self.ctx.caller, owner, token_id):
            raise CallerNotAuthorized(caller=self.ctx.caller, token_id=token_id)

        if owner != sender:
            raise OwnerMismatch(sender=sender, owner=owner, token_id=token_id)

        if is_null(to):
            raise InvalidRecipient(address=to)

        from_balance = checked_sub(self.balances[identity_key(sender)], 1)
        to_balance = checked_add(self.balances[identity_key(to)], 1) if to != sender else from_balance + 1

        del self.approvals[token_id]
        self.balances[identity_key(sender)] = from_balance
        self.balances[identity_key(to)] = to_balance
        self.owners[token_id] = to

        TransferEvent(self.rt, {'from': sender, 'to': to, 'token_id': token_id})

    @export
    def mint(self):
        caller = self.ctx.caller
        if is_null(caller):
            raise InvalidAddress(address=caller)

        token_id = checked_add(self.counter.get(), 1)
        balance = checked_add(self.balances[identity_key(caller)], 1)
        supply = checked_add(self.supply.get(), 1)

        del self.approvals[token_id]
        self.counter.set(token_id)
        self.owners[token_id] = caller
        self.balances[identity_key(caller)] = balance
        self.supply.set(supply)

        TransferEvent(self.rt, {'from': config.NULL_ADDRESS, 'to': caller, 'token_id': token_id})

        return token_id

    @export
    def burn(self, token_id):
        owner = self._owner(token_id)

        if not self._is_authorized(self.ctx.caller, owner, token_id):
            raise CallerNotAuthorized(caller=self.ctx.caller, token_id=token_id)

        balance = checked_sub(self.balances[identity_key(owner)], 1)
        supply = checked_sub(self.supply.get(), 1)

        del self.approvals[token_id]
        self.balances[identity_key(owner)] = balance
        self.supply.set(supply)
        del self.owners[token_id]

        TransferEvent(self.rt, {'from': owner, 'to': config.NULL_ADDRESS, 'token_id': token_id})

    @export
    def token_uri(self, token_id):
        owner = self._owner(token_id)

        timestamp = environment_reading(config.NOW_KEY, self.rt.now)
        block_num = environment_reading(config.BLOCK_NUM_KEY, self.rt.block_num)

        return render_token_uri(token_id=token_id,
                                owner=owner,
                                timestamp=timestamp,
                                block_num=block_num)
