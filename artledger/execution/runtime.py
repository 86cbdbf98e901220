from artledger import config


class Context:
    def __init__(self, base_state):
        self._base_state = base_state

    def _get_state(self):
        return self._base_state

    @property
    def this(self):
        return self._get_state()['this']

    @property
    def caller(self):
        return self._get_state()['caller']

    @property
    def signer(self):
        return self._get_state()['signer']


class Runtime:
    """
    Per-executor call state: who is calling, what the environment looks like, and which notifications the call
    has raised so far. Environment values are read once per call; the contract never looks at a live clock.
    """
    def __init__(self):
        self.context = Context({
            'this': None,
            'caller': None,
            'signer': None
        })
        self.env = {}
        self.events = []

    def set_up(self, sender, contract_name, environment):
        self.context._base_state = {
            'signer': sender,
            'caller': sender,
            'this': contract_name
        }
        self.env = dict(environment)
        self.events = []

    def clean_up(self):
        self.context._base_state = {
            'this': None,
            'caller': None,
            'signer': None
        }
        self.env = {}
        self.events = []

    @property
    def now(self):
        return self.env.get(config.NOW_KEY)

    @property
    def block_num(self):
        return self.env.get(config.BLOCK_NUM_KEY, config.BLOCK_NUM_DEFAULT)

    def emit(self, event: str, data: dict):
        self.events.append({
            'event': event,
            'data': data
        })
