import threading
import traceback
from copy import deepcopy

from artledger import config
from artledger.contracts.nft import ArtLedger
from artledger.db.driver import LedgerDriver
from artledger.exceptions import InvariantViolation
from artledger.execution.runtime import Runtime
from artledger.logger import get_logger
from artledger.stdlib.bridge.access import is_exported

log = get_logger('Executor')


class Executor:
    def __init__(self, driver=None):
        self.driver = driver

        if not self.driver:
            self.driver = LedgerDriver()

        self.runtime = Runtime()
        self.contracts = {
            config.CONTRACT_NAME: ArtLedger(driver=self.driver, rt=self.runtime)
        }

        # Published notifications, in the order their calls succeeded
        self.events = []

        # One call at a time: writers never interleave, readers never see half a transfer
        self.lock = threading.RLock()

    def execute(self, sender, contract_name, function_name, kwargs,
                environment={},
                auto_commit=True) -> dict:

        assert not function_name.startswith(config.PRIVATE_METHOD_PREFIX), 'Private method not callable.'

        contract = self.contracts.get(contract_name)
        assert contract is not None, 'Contract {} does not exist.'.format(contract_name)

        func = getattr(contract, function_name, None)
        assert func is not None and is_exported(func), \
            'Function {} is not exported by {}.'.format(function_name, contract_name)

        with self.lock:
            self.runtime.set_up(sender=sender, contract_name=contract_name, environment=environment)
            log.debug('{} -> {}.{}({})'.format(sender, contract_name, function_name, kwargs))

            try:
                result = func(**kwargs)
                status_code = 0
                writes = deepcopy(self.driver.pending_writes)
                events = list(self.runtime.events)

                if auto_commit:
                    self.driver.commit()

                self.events.extend(events)

            except InvariantViolation as e:
                self.driver.clear_pending_state()
                self.runtime.clean_up()
                log.critical('Ledger invariant violated in {}.{}: {}'.format(contract_name, function_name, e))
                log.critical(traceback.format_exc())
                raise

            except Exception as e:
                result = e
                status_code = 1
                writes = {}
                events = []
                log.error(str(e))
                log.debug(traceback.format_exc())
                self.driver.clear_pending_state()

            self.runtime.clean_up()

        output = {
            'status_code': status_code,
            'result': result,
            'writes': writes,
            'events': events,
        }

        return output
