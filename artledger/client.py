from artledger.execution.executor import Executor
from artledger.db.driver import LedgerDriver
from artledger.stdlib.bridge.time import Datetime

from . import config


class LedgerClient:
    """
    Caller-facing surface of the ledger. Each operation runs through the Executor as one atomic call; a failed call
    raises the error it produced and leaves the ledger untouched.

    The environment (clock reading and block counter) is injected. Anything passed per call overrides the client's
    environment for that call only. A missing clock reading defaults to the current UTC time.
    """
    def __init__(self, signer='sys',
                 driver=None,
                 environment=None,
                 contract_name=config.CONTRACT_NAME):

        self.raw_driver = driver or LedgerDriver()
        self.executor = Executor(driver=self.raw_driver)
        self.signer = signer
        self.environment = environment or {}
        self.contract_name = contract_name

    @property
    def events(self):
        return self.executor.events

    def flush(self):
        with self.executor.lock:
            self.raw_driver.flush()
            self.executor.events.clear()

    def now(self):
        return Datetime.utcnow()

    def _build_environment(self, environment):
        env = dict(self.environment)
        env.update(environment or {})

        if env.get(config.NOW_KEY) is None:
            env[config.NOW_KEY] = self.now()

        if env.get(config.BLOCK_NUM_KEY) is None:
            env[config.BLOCK_NUM_KEY] = config.BLOCK_NUM_DEFAULT

        return env

    def _call(self, func, signer=None, environment=None, **kwargs):
        output = self.executor.execute(sender=signer or self.signer,
                                       contract_name=self.contract_name,
                                       function_name=func,
                                       kwargs=kwargs,
                                       environment=self._build_environment(environment))

        if output['status_code'] == 1:
            raise output['result']

        return output['result']

    # Queries

    def name(self):
        return self._call('name')

    def symbol(self):
        return self._call('symbol')

    def total_supply(self):
        return self._call('total_supply')

    def balance_of(self, owner):
        return self._call('balance_of', owner=owner)

    def owner_of(self, token_id):
        return self._call('owner_of', token_id=token_id)

    def get_approved(self, token_id):
        return self._call('get_approved', token_id=token_id)

    def is_approved_for_all(self, owner, operator):
        return self._call('is_approved_for_all', owner=owner, operator=operator)

    def token_uri(self, token_id, environment=None):
        return self._call('token_uri', environment=environment, token_id=token_id)

    describe = token_uri

    # Mutations

    def mint(self, signer=None, environment=None):
        return self._call('mint', signer=signer, environment=environment)

    def approve(self, to, token_id, signer=None, environment=None):
        return self._call('approve', signer=signer, environment=environment, to=to, token_id=token_id)

    def set_approval_for_all(self, operator, approved, signer=None, environment=None):
        return self._call('set_approval_for_all', signer=signer, environment=environment,
                          operator=operator, approved=approved)

    def transfer_from(self, sender, to, token_id, signer=None, environment=None):
        return self._call('transfer_from', signer=signer, environment=environment,
                          sender=sender, to=to, token_id=token_id)

    def burn(self, token_id, signer=None, environment=None):
        return self._call('burn', signer=signer, environment=environment, token_id=token_id)
